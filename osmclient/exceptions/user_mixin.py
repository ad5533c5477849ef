from typing import NoReturn

from osmclient.exceptions.errors import PreconditionError


class UserExceptionsMixin:
    def user_ids_empty(self) -> NoReturn:
        raise PreconditionError('At least one user id is required')

    def user_preference_key_empty(self) -> NoReturn:
        raise PreconditionError('Preference key cannot be empty')
