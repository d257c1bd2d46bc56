"""
In-memory host used by the CLI simulation and the test suite.
"""

import logging
from typing import Dict, List, Optional

from ..schemas import ForegroundCategory, Notification, NotificationChannel
from .protocol import ForegroundHost, PermissionExchange, PromotionRefusedError

logger = logging.getLogger(__name__)


class SimulatedHost(PermissionExchange, ForegroundHost):
    """
    Records every platform call instead of performing it.

    Set ``refuse_promotion`` to make the next promotions fail the way a
    platform policy rejection would.
    """

    def __init__(self, refuse_promotion: bool = False):
        self.refuse_promotion = refuse_promotion
        self.channels: Dict[str, NotificationChannel] = {}
        self.notifications: Dict[int, Notification] = {}
        self.category: Optional[ForegroundCategory] = None
        self.launched_requests: List[int] = []
        self.post_count = 0

    @property
    def in_foreground(self) -> bool:
        return self.category is not None

    def launch_capture_request(self, request_code: int) -> None:
        logger.debug("Consent dialog shown (request %s)", request_code)
        self.launched_requests.append(request_code)

    def create_notification_channel(self, channel: NotificationChannel) -> None:
        self.channels[channel.channel_id] = channel

    def start_foreground(
        self,
        notification_id: int,
        notification: Notification,
        category: ForegroundCategory,
    ) -> None:
        if self.refuse_promotion:
            raise PromotionRefusedError("Foreground promotion not allowed")
        if notification.channel_id not in self.channels:
            logger.debug("Posting to unregistered channel %s", notification.channel_id)
        self.notifications[notification_id] = notification
        self.category = category
        self.post_count += 1

    def stop_foreground(self, notification_id: int) -> None:
        self.notifications.pop(notification_id, None)
        self.category = None
