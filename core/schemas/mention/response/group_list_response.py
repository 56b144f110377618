"""Group list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class GroupListResponse(BaseSchemaModel):
    """Group names offered for mention autocomplete."""

    groups: list[str] = Field(default_factory=list)
