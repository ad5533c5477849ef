from datetime import datetime
from typing import NotRequired, TypedDict

from osmclient.models.bounds import Bounds
from osmclient.models.types import ChangesetCommentId, ChangesetId, DisplayName, UserId


class ChangesetComment(TypedDict):
    id: NotRequired[ChangesetCommentId]
    created_at: datetime
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    text: str


class Changeset(TypedDict):
    id: ChangesetId
    tags: dict[str, str]
    open: bool
    created_at: datetime
    closed_at: NotRequired[datetime]
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    bounds: NotRequired[Bounds]
    """Set by the server from the uploaded edits, absent for empty changesets."""
    comments_count: int
    changes_count: int
    discussion: NotRequired[list[ChangesetComment]]
