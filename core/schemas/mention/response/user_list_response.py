"""User list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.mention.forum_user import ForumUser


class UserListResponse(BaseSchemaModel):
    """Users offered for mention autocomplete."""

    users: list[ForumUser] = Field(default_factory=list)
