from dataclasses import dataclass
from datetime import datetime

from osmclient.config import NOTE_QUERY_LIMIT_MAX
from osmclient.exceptions import raise_for
from osmclient.lib.query_format import format_note_date
from osmclient.models.types import DisplayName, UserId


@dataclass(frozen=True, kw_only=True, slots=True)
class NoteQuery:
    text: str
    user_id: UserId | None = None
    """Only notes created by this user, does not work together with `display_name`."""
    display_name: DisplayName | None = None
    limit: int | None = None
    closed_days: int | None = None
    """0 means only open notes, -1 means all notes."""
    from_date: datetime | None = None
    to_date: datetime | None = None

    def validate(self) -> None:
        if not self.text:
            raise_for.note_query_text_missing()
        if self.user_id is not None and self.display_name is not None:
            raise_for.note_query_user_conflict()
        if self.from_date is not None and self.to_date is not None and self.from_date > self.to_date:
            raise_for.note_query_date_order(self.from_date, self.to_date)
        if self.limit is not None and not 1 <= self.limit <= NOTE_QUERY_LIMIT_MAX:
            raise_for.note_limit_out_of_range(self.limit, NOTE_QUERY_LIMIT_MAX)

    def to_params(self) -> dict[str, str]:
        """
        Validate the query and encode it as URL parameters.

        >>> NoteQuery(text='bench', limit=10).to_params()
        {'q': 'bench', 'limit': '10'}
        """
        self.validate()
        params: dict[str, str] = {'q': self.text}

        if self.limit is not None:
            params['limit'] = str(self.limit)
        if self.closed_days is not None:
            params['closed'] = str(self.closed_days)
        if self.display_name is not None:
            params['display_name'] = self.display_name
        if self.user_id is not None:
            params['user'] = str(self.user_id)
        if self.from_date is not None:
            params['from'] = format_note_date(self.from_date)
        if self.to_date is not None:
            params['to'] = format_note_date(self.to_date)

        return params
