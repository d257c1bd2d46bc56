"""
Configuration for capture capabilities and notifications.
"""

from .capture_config import (
    CaptureCapabilities,
    NotificationConfig,
    capabilities_for_sdk,
    detect_capabilities,
    get_notification_config,
)

__all__ = [
    "CaptureCapabilities",
    "NotificationConfig",
    "capabilities_for_sdk",
    "detect_capabilities",
    "get_notification_config",
]
