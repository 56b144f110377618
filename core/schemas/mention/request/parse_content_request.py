"""Parse content request schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class ParseContentRequest(BaseSchemaModel):
    """Rendered post content whose mentions should become links."""

    model_config = ConfigDict(str_strip_whitespace=False)

    content: str = Field("", description="Rendered post content")
