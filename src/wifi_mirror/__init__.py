"""
Screen-capture session shell for the WiFi Mirror app.

Coordinates the capture consent exchange and the foreground capture session
on top of pluggable host facilities.
"""

from .config import CaptureCapabilities, capabilities_for_sdk, detect_capabilities
from .schemas import CaptureGrant, SessionState
from .services import (
    CaptureSessionManager,
    PermissionCoordinator,
    ServiceChannel,
    create_service_channel,
)

__version__ = "0.1.0"

__all__ = [
    "CaptureCapabilities",
    "CaptureGrant",
    "CaptureSessionManager",
    "PermissionCoordinator",
    "ServiceChannel",
    "SessionState",
    "capabilities_for_sdk",
    "create_service_channel",
    "detect_capabilities",
]
