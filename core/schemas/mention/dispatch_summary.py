"""Dispatch summary schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class TargetDelivery(BaseSchemaModel):
    """Recipients actually notified for one target."""

    recipient_label: str
    delivered_uids: list[int] = Field(default_factory=list)


class DispatchSummary(BaseSchemaModel):
    """Outcome of dispatching mention notifications for a post."""

    post_id: int
    deliveries: list[TargetDelivery] = Field(default_factory=list)

    @property
    def delivered_count(self) -> int:
        """Total number of notified users across targets."""
        return sum(len(delivery.delivered_uids) for delivery in self.deliveries)
