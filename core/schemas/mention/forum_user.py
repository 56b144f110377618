"""Forum user schema used by autocomplete endpoints."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ForumUser(BaseSchemaModel):
    """Public user fields returned by the forum."""

    uid: int = Field(..., description="User ID")
    username: str = Field(..., description="Display username")
    userslug: str | None = Field(None, description="URL-safe username")
    fullname: str | None = Field(None, description="Full name, if visible")
    picture: str | None = Field(None, description="Avatar URL")
