"""Notification job schema - the payload carried through the queue"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from ...config import NOTIFICATION_BACKOFF_SECONDS, NOTIFICATION_MAX_ATTEMPTS

# "deleted" is accepted from older producers and rendered like "cancelled"
NotificationAction = Literal["created", "cancelled", "deleted"]


class NotificationJob(BaseModel):
    """One booking or cancellation event addressed to the customer"""

    recipientName: str
    recipientEmail: str
    counterpartName: str
    scheduledAt: datetime
    objective: str
    action: NotificationAction

    # Delivery policy travels with the job
    attempts: int = NOTIFICATION_MAX_ATTEMPTS
    backoffSeconds: int = NOTIFICATION_BACKOFF_SECONDS

    @property
    def is_cancellation(self) -> bool:
        return self.action != "created"
