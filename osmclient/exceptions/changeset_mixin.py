from collections.abc import Iterable
from typing import TYPE_CHECKING, NoReturn

from osmclient.exceptions.errors import PreconditionError, SerializationError

if TYPE_CHECKING:
    from osmclient.models.types import ChangesetId


class ChangesetExceptionsMixin:
    def changeset_tags_missing(self, keys: Iterable[str]) -> NoReturn:
        raise PreconditionError(f'Changeset tags must contain non-empty {", ".join(map(repr, keys))}')

    def changeset_tags_invalid(self, message: str) -> NoReturn:
        raise PreconditionError(f'Invalid changeset tags: {message}')

    def changeset_query_user_conflict(self) -> NoReturn:
        raise PreconditionError('Query can only specify user_id OR display_name, not both')

    def changeset_query_state_conflict(self) -> NoReturn:
        raise PreconditionError('Query can only specify open_only OR closed_only, not both')

    def changeset_query_time_missing(self) -> NoReturn:
        raise PreconditionError('Query must specify min_closed if max_opened is specified')

    def changeset_not_in_response(self, changeset_id: 'ChangesetId | None') -> NoReturn:
        raise SerializationError(f'Response does not contain changeset {changeset_id or ""}'.rstrip())
