from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from osmclient.exceptions import raise_for
from osmclient.lib.query_format import format_bbox, format_query_date
from osmclient.models.bounds import Bounds
from osmclient.models.types import ChangesetId, DisplayName, UserId


@dataclass(frozen=True, kw_only=True, slots=True)
class ChangesetQuery:
    """
    Filters for the changeset search endpoint.

    Every field is optional; an empty query returns the most recent changesets.
    """

    bounds: Bounds | None = None
    user_id: UserId | None = None
    display_name: DisplayName | None = None
    min_closed: datetime | None = None
    """Only changesets closed after this date."""
    max_opened: datetime | None = None
    """Only changesets opened before this date, requires `min_closed`."""
    open_only: bool = False
    closed_only: bool = False
    changeset_ids: Sequence[ChangesetId] = ()
    limit: int | None = None

    def validate(self) -> None:
        if self.user_id is not None and self.display_name is not None:
            raise_for.changeset_query_user_conflict()
        if self.open_only and self.closed_only:
            raise_for.changeset_query_state_conflict()
        if self.max_opened is not None and self.min_closed is None:
            raise_for.changeset_query_time_missing()

    def to_params(self) -> dict[str, str]:
        """
        Validate the query and encode it as URL parameters.

        >>> ChangesetQuery(user_id=1, open_only=True).to_params()
        {'user': '1', 'open': 'true'}
        """
        self.validate()
        params: dict[str, str] = {}

        if self.bounds is not None:
            params['bbox'] = format_bbox(self.bounds)
        if self.user_id is not None:
            params['user'] = str(self.user_id)
        if self.display_name is not None:
            params['display_name'] = self.display_name
        if self.min_closed is not None:
            params['time'] = (
                format_query_date(self.min_closed)
                if self.max_opened is None
                else f'{format_query_date(self.min_closed)},{format_query_date(self.max_opened)}'
            )
        if self.open_only:
            params['open'] = 'true'
        if self.closed_only:
            params['closed'] = 'true'
        if self.changeset_ids:
            params['changesets'] = ','.join(map(str, self.changeset_ids))
        if self.limit is not None:
            params['limit'] = str(self.limit)

        return params
