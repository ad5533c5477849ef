from collections.abc import Mapping

from pydantic import ValidationError

from osmclient.client.base import ClientBase, parse_int, parse_xml_root
from osmclient.config import CHANGESET_REQUIRED_TAGS
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.models.changeset import Changeset
from osmclient.models.changeset_query import ChangesetQuery
from osmclient.models.diff import OSMChange
from osmclient.models.types import ChangesetId
from osmclient.models.validating.tags import TagsValidating


class ChangesetMixin(ClientBase):
    async def create_changeset(self, tags: Mapping[str, str]) -> ChangesetId:
        """
        Open a new changeset and return its id.

        The tags must contain non-empty comment and created_by.
        """
        _validate_changeset_tags(tags)
        response = await self._send_xml(
            'PUT',
            'changeset/create',
            self._osm_document(Format06.encode_changeset(tags)),
        )
        return ChangesetId(parse_int(response, 'changeset id'))

    async def update_changeset(self, changeset_id: ChangesetId, tags: Mapping[str, str]) -> Changeset:
        """Replace the tags of the open changeset."""
        _validate_changeset_tags(tags)
        response = await self._send_xml(
            'PUT',
            f'changeset/{changeset_id}',
            self._osm_document(Format06.encode_changeset(tags)),
        )
        return _decode_changeset(parse_xml_root(response), changeset_id)

    async def close_changeset(self, changeset_id: ChangesetId) -> None:
        """
        Close the changeset.

        Closing an already closed changeset raises ConflictError.
        """
        await self._send_xml('PUT', f'changeset/{changeset_id}/close')

    async def get_changeset(self, changeset_id: ChangesetId, *, include_discussion: bool = False) -> Changeset:
        osm = await self._get_xml(
            f'changeset/{changeset_id}',
            params={'include_discussion': 'true'} if include_discussion else None,
        )
        return _decode_changeset(osm, changeset_id)

    async def query_changesets(self, query: ChangesetQuery | None = None) -> list[Changeset]:
        """
        Search changesets, the query is validated before any request is made.
        An empty query returns the most recent changesets.
        """
        params = (query or ChangesetQuery()).to_params()
        osm = await self._get_xml('changesets', params=params)
        with decode_context('changeset'):
            return Format06.decode_changesets(_changesets(osm))

    async def download_changeset(self, changeset_id: ChangesetId) -> OSMChange:
        """Get the edits made in the changeset."""
        osm_change = await self._get_xml(f'changeset/{changeset_id}/download', sequence=True, sequence_depth=2)
        with decode_context('osmChange'):
            return Format06.decode_osmchange(osm_change)

    async def comment_changeset(self, changeset_id: ChangesetId, text: str) -> Changeset:
        """Add a comment to the closed changeset discussion."""
        response = await self._send_xml('POST', f'changeset/{changeset_id}/comment', data={'text': text})
        return _decode_changeset(parse_xml_root(response), changeset_id)

    async def subscribe_changeset(self, changeset_id: ChangesetId) -> None:
        await self._send_xml('POST', f'changeset/{changeset_id}/subscribe')

    async def unsubscribe_changeset(self, changeset_id: ChangesetId) -> None:
        await self._send_xml('POST', f'changeset/{changeset_id}/unsubscribe')


def _validate_changeset_tags(tags: Mapping[str, str]) -> None:
    missing = [key for key in CHANGESET_REQUIRED_TAGS if not tags.get(key)]
    if missing:
        raise_for.changeset_tags_missing(missing)

    try:
        TagsValidating(tags=dict(tags))
    except ValidationError as e:
        raise_for.changeset_tags_invalid(str(e))


def _changesets(osm) -> list:
    # <osm/> without changesets is parsed as an empty mapping
    return osm.get('changeset', []) if isinstance(osm, dict) else []


def _decode_changeset(osm, changeset_id: ChangesetId) -> Changeset:
    with decode_context('changeset'):
        changesets = Format06.decode_changesets(_changesets(osm))
    if not changesets:
        raise_for.changeset_not_in_response(changeset_id)
    return changesets[0]
