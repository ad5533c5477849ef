from datetime import datetime
from typing import NotRequired, TypedDict

from osmclient.models.element_member import ElementMember
from osmclient.models.element_ref import ElementRef
from osmclient.models.element_type import ElementType
from osmclient.models.types import ChangesetId, DisplayName, ElementId, UserId


class Element(TypedDict):
    type: ElementType
    id: ElementId
    """Positive for stored elements, negative placeholder for new ones."""
    version: NotRequired[int]
    changeset_id: NotRequired[ChangesetId]
    visible: NotRequired[bool]
    tags: NotRequired[dict[str, str]]

    # node
    lon: NotRequired[float]
    lat: NotRequired[float]

    # way
    nodes: NotRequired[list[ElementId]]

    # relation
    members: NotRequired[list[ElementMember]]

    # read-only, set by the server
    created_at: NotRequired[datetime]
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]


def element_ref(element: Element) -> ElementRef:
    return ElementRef(element['type'], element['id'])
