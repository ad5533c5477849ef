from typing import NamedTuple

from osmclient.models.element_type import ElementType
from osmclient.models.types import ElementId


class ElementMember(NamedTuple):
    type: ElementType
    id: ElementId
    role: str = ''
