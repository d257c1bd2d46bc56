"""
Platform-agnostic protocols for the OS facilities a capture session needs.

Host implementations (a real device bridge, or the in-memory simulation)
implement these so the coordinator and session manager never touch
platform APIs directly.
"""

from abc import ABC, abstractmethod

from ..schemas import ForegroundCategory, Notification, NotificationChannel


class PromotionRefusedError(Exception):
    """Raised by a host that declines foreground promotion."""


class PermissionExchange(ABC):
    """
    Launches the OS screen-capture consent dialog.

    The answer is delivered later through
    ``PermissionCoordinator.on_permission_result``.
    """

    @abstractmethod
    def launch_capture_request(self, request_code: int) -> None:
        """
        Show the consent dialog.

        Args:
            request_code: Code the result callback will carry back
        """
        ...


class ForegroundHost(ABC):
    """
    Foreground-service and notification facility.
    """

    @abstractmethod
    def create_notification_channel(self, channel: NotificationChannel) -> None:
        """Register a notification channel. Must be idempotent."""
        ...

    @abstractmethod
    def start_foreground(
        self,
        notification_id: int,
        notification: Notification,
        category: ForegroundCategory,
    ) -> None:
        """
        Post the notification and promote the process to foreground.

        Raises:
            PromotionRefusedError: The platform declined the promotion
        """
        ...

    @abstractmethod
    def stop_foreground(self, notification_id: int) -> None:
        """Drop foreground status and remove the notification."""
        ...
