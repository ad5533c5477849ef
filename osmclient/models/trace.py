from datetime import datetime
from typing import Literal, NamedTuple, NotRequired, TypedDict

from osmclient.models.types import DisplayName, TraceId, UserId

TraceVisibility = Literal['identifiable', 'public', 'trackable', 'private']


class GpxFile(TypedDict):
    id: NotRequired[TraceId]
    name: str
    description: str
    visibility: TraceVisibility
    tags: NotRequired[list[str]]

    # read-only, set by the server
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    created_at: NotRequired[datetime]
    pending: NotRequired[bool]
    lon: NotRequired[float]
    lat: NotRequired[float]


class TraceData(NamedTuple):
    """Trace file exactly as uploaded, not necessarily GPX (may be an archive)."""

    content: bytes
    file_name: str | None
    content_type: str | None
