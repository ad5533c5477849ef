from typing import Annotated

from annotated_types import MaxLen, MinLen
from pydantic import BaseModel, ConfigDict, field_validator

from osmclient.config import TAGS_KEY_MAX_LENGTH, TAGS_LIMIT, TAGS_VALUE_MAX_LENGTH


class TagsValidating(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False, strict=True)

    tags: dict[
        Annotated[str, MinLen(1), MaxLen(TAGS_KEY_MAX_LENGTH)],
        Annotated[str, MaxLen(TAGS_VALUE_MAX_LENGTH)],
    ]

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, tags: dict[str, str]) -> dict[str, str]:
        if len(tags) > TAGS_LIMIT:
            raise ValueError(f'Cannot have more than {TAGS_LIMIT} tags')
        return tags
