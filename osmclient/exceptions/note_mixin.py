from datetime import datetime
from typing import NoReturn

from osmclient.exceptions.errors import PreconditionError


class NoteExceptionsMixin:
    def note_query_text_missing(self) -> NoReturn:
        raise PreconditionError('Note query text is required')

    def note_query_user_conflict(self) -> NoReturn:
        raise PreconditionError('Query can only specify user_id OR display_name, not both')

    def note_query_date_order(self, from_date: datetime, to_date: datetime) -> NoReturn:
        raise PreconditionError(f'Query from_date ({from_date}) must be before to_date ({to_date})')

    def note_limit_out_of_range(self, limit: int, limit_max: int) -> NoReturn:
        raise PreconditionError(f'Note limit must be between 1 and {limit_max}, got {limit}')
