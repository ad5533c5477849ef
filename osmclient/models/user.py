from datetime import datetime
from typing import NotRequired, TypedDict

from osmclient.models.types import DisplayName, UserId


class User(TypedDict):
    id: UserId
    display_name: DisplayName
    created_at: datetime
    description: NotRequired[str]
    changesets_count: NotRequired[int]
    traces_count: NotRequired[int]
    roles: NotRequired[list[str]]
