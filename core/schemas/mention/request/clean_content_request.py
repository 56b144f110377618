"""Clean content request schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class CleanContentRequest(BaseSchemaModel):
    """Content to strip of protected regions."""

    model_config = ConfigDict(str_strip_whitespace=False)

    content: str = Field("", description="Post content")
    is_markdown: bool = Field(True, description="Content is raw markdown")
    strip_blockquote: bool = Field(True, description="Remove blockquotes")
    strip_code: bool = Field(True, description="Remove inline code and code blocks")
