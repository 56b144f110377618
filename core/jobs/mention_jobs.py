"""Background job dispatching mention notifications.

The post-created endpoint enqueues ``dispatch_mentions_job`` on the RQ queue;
workers drive the async notification pipeline to completion. Failures are
logged and re-raised so RQ marks the job failed.
"""

from typing import Any

from asgiref.sync import async_to_sync

import structlog

from core.config.mentions_settings import load_mentions_settings
from core.exceptions import MentionDispatchError
from core.schemas.mention import PostData
from core.services.mention_notification_service import (
    mention_notification_service,
)

logger = structlog.get_logger(__name__)


def dispatch_mentions_job(post_data: dict[str, Any]) -> dict[str, Any]:
    """Notify the users mentioned by a newly created post.

    Args:
        post_data: Serialized PostData.

    Returns:
        Serialized DispatchSummary.

    Raises:
        MentionDispatchError: If some recipient targets could not be notified.
    """
    post = PostData.model_validate(post_data)
    config = load_mentions_settings()

    try:
        summary = async_to_sync(mention_notification_service.notify)(post, config)
    except MentionDispatchError as e:
        logger.error(
            "mention_dispatch_failed",
            post_id=post.pid,
            failed_targets=e.failed_targets,
        )
        raise
    except Exception as e:
        logger.error(
            "mention_dispatch_aborted",
            post_id=post.pid,
            error=str(e),
        )
        raise

    logger.info(
        "mention_dispatch_completed",
        post_id=post.pid,
        delivered=summary.delivered_count,
    )
    return summary.model_dump()
