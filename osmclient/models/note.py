from datetime import datetime
from typing import Literal, NotRequired, TypedDict

from osmclient.models.types import DisplayName, NoteId, UserId

NoteStatus = Literal['open', 'closed', 'hidden']
NoteEvent = Literal['opened', 'closed', 'reopened', 'commented', 'hidden']


class NoteComment(TypedDict):
    created_at: datetime
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    event: NoteEvent
    text: str


class Note(TypedDict):
    id: NoteId
    lon: float
    lat: float
    status: NoteStatus
    created_at: datetime
    closed_at: NotRequired[datetime]
    comments: list[NoteComment]
