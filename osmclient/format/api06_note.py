from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import TypeAdapter

from osmclient.config import PYDANTIC_CONFIG
from osmclient.models.note import Note, NoteComment

_NoteListValidator = TypeAdapter(list[Note], config=PYDANTIC_CONFIG)


class Note06Mixin:
    @staticmethod
    def decode_notes(notes: Iterable[dict]) -> list[Note]:
        """
        >>> decode_notes([{'@lon': 0.1, '@lat': 51.0, 'id': '16659', 'status': 'open', ...}])
        [{'id': 16659, 'lon': 0.1, 'lat': 51.0, 'status': 'open', ...}]
        """
        return _NoteListValidator.validate_python([_decode_note(note) for note in notes])


def _decode_note(data: dict) -> Note:
    comments = data.get('comments')
    note: Note = {
        'id': int(data['id']),
        'lon': data['@lon'],
        'lat': data['@lat'],
        'status': data['status'],
        'created_at': _decode_date(data['date_created']),
        'comments': [
            _decode_note_comment(comment)  #
            for comment in (comments.get('comment', ()) if isinstance(comments, dict) else ())
        ],
    }

    if (closed_at := data.get('date_closed')) is not None:
        note['closed_at'] = _decode_date(closed_at)

    return note


def _decode_note_comment(data: dict) -> NoteComment:
    """
    >>> _decode_note_comment({'date': '2019-06-15 08:26:04 UTC', 'uid': '1234', 'user': ['userName'], ...})
    {'created_at': datetime(2019, 6, 15, 8, 26, 4, tzinfo=UTC), 'user_id': 1234, 'user': 'userName', ...}
    """
    text = data.get('text')
    comment: NoteComment = {
        'created_at': _decode_date(data['date']),
        'event': data['action'],
        'text': text if isinstance(text, str) else '',
    }

    if (user_id := data.get('uid')) is not None:
        comment['user_id'] = int(user_id)
    if (user := data.get('user')) is not None:
        # <user> is always parsed as a list
        comment['user'] = user[0] if isinstance(user, list) else user

    return comment


def _decode_date(value: str) -> datetime:
    """
    >>> _decode_date('2019-06-15 08:26:04 UTC')
    datetime.datetime(2019, 6, 15, 8, 26, 4, tzinfo=datetime.timezone.utc)
    """
    return datetime.strptime(value, '%Y-%m-%d %H:%M:%S UTC').replace(tzinfo=UTC)
