from collections.abc import Iterable

from osmclient.exceptions import raise_for
from osmclient.models.diff import DiffResult, DiffResultEntry
from osmclient.models.element_ref import ElementRef
from osmclient.models.element_type import is_element_type


class Diff06Mixin:
    @staticmethod
    def decode_diff_result(items: Iterable[tuple[str, dict]]) -> DiffResult:
        """
        Decode a sequence-parsed diffResult document.
        Deleted elements have neither a new id nor a new version.

        >>> decode_diff_result([
        ...     ('@version', 0.6),
        ...     ('node', {'@old_id': -1, '@new_id': 1, '@new_version': 1}),
        ...     ('way', {'@old_id': 2}),
        ... ])
        {ElementRef(type='node', id=-1): DiffResultEntry(new_id=1, new_version=1),
         ElementRef(type='way', id=2): DiffResultEntry(new_id=None, new_version=None)}
        """
        result: DiffResult = {}

        for key, data in items:
            if key.startswith('@'):
                continue
            if not is_element_type(key):
                raise_for.diff_unsupported_result(key)

            ref = ElementRef(key, data['@old_id'])  # pyright: ignore[reportArgumentType]
            result[ref] = DiffResultEntry(data.get('@new_id'), data.get('@new_version'))

        return result
