"""
Wiring of the capture core onto a host.
"""

from typing import Optional

from ..config import CaptureCapabilities, NotificationConfig, detect_capabilities
from ..host import ForegroundHost, PermissionExchange
from .channel import ServiceChannel
from .permission import PermissionCoordinator
from .session import CaptureSessionManager


def create_service_channel(
    host: PermissionExchange,
    capabilities: Optional[CaptureCapabilities] = None,
    notification_config: Optional[NotificationConfig] = None,
    foreground_host: Optional[ForegroundHost] = None,
) -> ServiceChannel:
    """
    Build a session manager, coordinator and channel sharing one host.

    Args:
        host: Permission exchange, also used as foreground host unless
            ``foreground_host`` is given
        capabilities: Resolved capabilities, detected when omitted
        notification_config: Notification overrides
        foreground_host: Separate foreground-service facility

    Returns:
        ServiceChannel ready to receive UI calls
    """
    capabilities = capabilities or detect_capabilities()
    manager = CaptureSessionManager(
        foreground_host or host, capabilities, notification_config
    )
    coordinator = PermissionCoordinator(host, manager, capabilities)
    return ServiceChannel(coordinator, manager, capabilities)
