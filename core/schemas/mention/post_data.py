"""Post payload schema for the post-created event."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class PostData(BaseSchemaModel):
    """Post that was just created on the forum."""

    model_config = ConfigDict(str_strip_whitespace=False)

    pid: int = Field(..., description="Post ID")
    tid: int = Field(..., description="Topic ID")
    uid: int = Field(..., description="Author user ID")
    cid: int | None = Field(None, description="Category ID of the topic")
    content: str = Field("", description="Raw post content (markdown)")
