"""Rate-limited chunked iteration."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

import structlog

from core.constants import MENTION_BATCH_INTERVAL_SECONDS, MENTION_BATCH_SIZE

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def process_in_batches(
    items: Sequence[T],
    handler: Callable[[list[T]], Awaitable[None]],
    *,
    batch_size: int = MENTION_BATCH_SIZE,
    interval: float = MENTION_BATCH_INTERVAL_SECONDS,
) -> int:
    """Feed ``items`` to ``handler`` in fixed-size chunks.

    Chunks run strictly one after another; the next chunk starts no sooner
    than ``interval`` seconds after the previous one finished. An error in
    the handler stops the iteration and propagates.

    Args:
        items: Items to process, in order.
        handler: Coroutine function called once per chunk.
        batch_size: Maximum chunk length.
        interval: Pause between chunks, in seconds.

    Returns:
        Number of chunks processed.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    batches = 0
    for start in range(0, len(items), batch_size):
        if batches and interval > 0:
            await asyncio.sleep(interval)
        chunk = list(items[start : start + batch_size])
        logger.debug(
            "Processing batch",
            batch_number=batches + 1,
            batch_length=len(chunk),
            total=len(items),
        )
        await handler(chunk)
        batches += 1
    return batches
