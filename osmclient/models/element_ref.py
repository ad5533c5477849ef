from typing import NamedTuple

from osmclient.models.element_type import ElementType
from osmclient.models.types import ElementId


class ElementRef(NamedTuple):
    type: ElementType
    id: ElementId


class ElementSelector(NamedTuple):
    """An element id for the multi fetch endpoints, optionally pinned to a version."""

    id: ElementId
    version: int | None = None

    def __str__(self) -> str:
        """
        >>> str(ElementSelector(12))
        '12'
        >>> str(ElementSelector(14, 1))
        '14v1'
        """
        return str(self.id) if self.version is None else f'{self.id}v{self.version}'
