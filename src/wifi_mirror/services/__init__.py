"""
Capture services: session lifecycle, permission exchange and UI channel.
"""

from .channel import ServiceChannel
from .factory import create_service_channel
from .permission import PermissionCoordinator
from .session import CaptureSessionManager

__all__ = [
    "CaptureSessionManager",
    "PermissionCoordinator",
    "ServiceChannel",
    "create_service_channel",
]
