"""Dispatch queued response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DispatchQueuedResponse(BaseSchemaModel):
    """Acknowledgement that a post's mentions were queued for dispatch."""

    post_id: int = Field(..., description="Post whose mentions are processed")
    job_id: str = Field(..., description="Background job ID")
    message: str = Field(..., description="Human-readable status")
