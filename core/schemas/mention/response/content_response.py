"""Content response schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class ContentResponse(BaseSchemaModel):
    """Transformed post content."""

    model_config = ConfigDict(str_strip_whitespace=False)

    content: str = Field(..., description="Resulting content")
