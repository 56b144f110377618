"""User search request schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ComposerContext(BaseSchemaModel):
    """Where the searching user is writing."""

    tid: int = Field(..., description="Topic being replied to")
    to_pid: int | None = Field(None, description="Post being replied to")


class UserSearchRequest(BaseSchemaModel):
    """Autocomplete query for mentionable users."""

    query: str = Field(..., min_length=1, description="Search text")
    composer: ComposerContext | None = Field(
        None, description="Composer context used for privileged replies"
    )
