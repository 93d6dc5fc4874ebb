"""
Notification dispatcher - producer side of the notification queue

Enqueueing is fire-and-forget from the caller's point of view: a queue that
is down or slow is logged and never fails the booking or cancellation that
triggered it.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from arq import ArqRedis, create_pool

from ...config import QUEUE_TIMEOUT_SECONDS
from ...worker import SEND_SCHEDULE_NOTIFICATION_TASK, get_redis_settings
from .schemas import NotificationJob

logger = logging.getLogger(__name__)


async def create_notification_pool() -> ArqRedis:
    return await create_pool(get_redis_settings())


class NotificationDispatcher:
    """Hands notification jobs to the arq worker"""

    def __init__(
        self,
        pool: Optional[ArqRedis] = None,
        pool_factory: Callable[[], Awaitable[ArqRedis]] = create_notification_pool,
        timeout: float = QUEUE_TIMEOUT_SECONDS,
    ):
        self.pool = pool
        self.pool_factory = pool_factory
        self.timeout = timeout

    async def _get_pool(self) -> ArqRedis:
        if self.pool is None:
            self.pool = await asyncio.wait_for(self.pool_factory(), timeout=self.timeout)
        return self.pool

    async def enqueue(self, job: NotificationJob) -> Optional[str]:
        """Queue a job; returns the arq job id, or None when the queue rejected it"""
        try:
            pool = await self._get_pool()
            queued = await asyncio.wait_for(
                pool.enqueue_job(SEND_SCHEDULE_NOTIFICATION_TASK, job.model_dump(mode="json")),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"⏰ Timed out queueing {job.action} notification for {job.recipientEmail}")
            return None
        except Exception as e:
            logger.error(f"❌ Failed to queue {job.action} notification: {e}")
            return None

        if queued is None:
            logger.warning(f"⚠️ Notification for {job.recipientEmail} was not accepted by the queue")
            return None

        logger.info(f"📋 Notification queued for {job.recipientEmail}: {queued.job_id}")
        return queued.job_id

    async def close(self) -> None:
        if self.pool is not None:
            try:
                await self.pool.close()
            except Exception as e:
                logger.debug(f"Pool close failed (non-critical): {e}")
            self.pool = None
