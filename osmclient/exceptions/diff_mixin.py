from typing import NoReturn

from osmclient.exceptions.errors import SerializationError


class DiffExceptionsMixin:
    def diff_unsupported_result(self, key: str) -> NoReturn:
        raise SerializationError(f'Unexpected diffResult entry {key!r}, choices are node, way, relation')
