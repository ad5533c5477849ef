from typing import NamedTuple, NotRequired, TypedDict

from osmclient.models.element import Element
from osmclient.models.element_ref import ElementRef
from osmclient.models.types import ElementId


class OSMChange(TypedDict):
    """
    A set of edits uploaded in one request.

    The server applies the sections in document order: create, modify, delete.
    Order within each section is preserved.
    """

    create: NotRequired[list[Element]]
    modify: NotRequired[list[Element]]
    delete: NotRequired[list[Element]]
    delete_if_unused: NotRequired[bool]
    """Silently skip deletions of elements that are still referenced."""


class DiffResultEntry(NamedTuple):
    new_id: ElementId | None
    new_version: int | None

    @property
    def deleted(self) -> bool:
        return self.new_id is None


type DiffResult = dict[ElementRef, DiffResultEntry]
"""Maps the submitted (type, id), placeholder ids included, to the assigned id and version."""
