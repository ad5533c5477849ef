from osmclient.client.base import ClientBase, check_bounds, parse_xml_root
from osmclient.config import NOTE_QUERY_DEFAULT_CLOSED_DAYS, NOTE_QUERY_DEFAULT_LIMIT, NOTE_QUERY_LIMIT_MAX
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.lib.query_format import format_bbox, format_coordinate
from osmclient.models.bounds import Bounds
from osmclient.models.note import Note
from osmclient.models.note_query import NoteQuery
from osmclient.models.types import NoteId


class NoteMixin(ClientBase):
    async def get_note(self, note_id: NoteId) -> Note:
        osm = await self._get_xml(f'notes/{note_id}')
        return _decode_note(osm)

    async def get_notes(
        self,
        bounds: Bounds,
        *,
        limit: int = NOTE_QUERY_DEFAULT_LIMIT,
        closed_days: int = NOTE_QUERY_DEFAULT_CLOSED_DAYS,
    ) -> list[Note]:
        """
        Get the notes within the bounding box.

        closed_days of 0 returns only open notes, -1 returns all notes.
        """
        check_bounds(bounds)
        if not 1 <= limit <= NOTE_QUERY_LIMIT_MAX:
            raise_for.note_limit_out_of_range(limit, NOTE_QUERY_LIMIT_MAX)

        osm = await self._get_xml(
            'notes',
            params={
                'bbox': format_bbox(bounds),
                'limit': str(limit),
                'closed': str(closed_days),
            },
        )
        return _decode_notes(osm)

    async def get_notes_feed(self, bounds: Bounds) -> bytes:
        """Get the RSS feed of the notes activity within the bounding box."""
        check_bounds(bounds)
        response = await self._request('GET', 'notes/feed', params={'bbox': format_bbox(bounds)})
        return response.content

    async def query_notes(self, query: NoteQuery) -> list[Note]:
        """Search notes, the query is validated before any request is made."""
        osm = await self._get_xml('notes/search', params=query.to_params())
        return _decode_notes(osm)

    async def create_note(self, lat: float, lon: float, text: str) -> Note:
        """Create a note, anonymously unless the client is authenticated."""
        response = await self._request(
            'POST',
            'notes',
            authenticated=True,
            params={'lat': format_coordinate(lat), 'lon': format_coordinate(lon), 'text': text},
        )
        return _decode_note(parse_xml_root(response))

    async def comment_note(self, note_id: NoteId, text: str) -> Note:
        return await self._note_action(note_id, 'comment', text)

    async def close_note(self, note_id: NoteId, text: str | None = None) -> Note:
        return await self._note_action(note_id, 'close', text)

    async def reopen_note(self, note_id: NoteId, text: str | None = None) -> Note:
        return await self._note_action(note_id, 'reopen', text)

    async def _note_action(self, note_id: NoteId, action: str, text: str | None) -> Note:
        response = await self._request(
            'POST',
            f'notes/{note_id}/{action}',
            authenticated=True,
            params={'text': text} if text is not None else None,
        )
        return _decode_note(parse_xml_root(response))


def _decode_notes(osm) -> list[Note]:
    with decode_context('note'):
        return Format06.decode_notes(osm.get('note', []) if isinstance(osm, dict) else [])


def _decode_note(osm) -> Note:
    notes = _decode_notes(osm)
    if not notes:
        raise_for.bad_response('Response does not contain the note')
    return notes[0]
