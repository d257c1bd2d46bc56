"""
Platform capability and notification configuration for capture sessions.

Capabilities are resolved once at startup from the platform API level and
consumed uniformly by the coordinator and session manager.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

SDK_ENV_VAR = "WIFI_MIRROR_SDK_INT"
DEFAULT_SDK_INT = 34

# API levels at which platform behavior changes
NOTIFICATION_CHANNELS_SDK = 26
TYPED_FOREGROUND_SDK = 29
UPFRONT_GRANT_SDK = 34


class CaptureCapabilities(BaseModel):
    """
    Capture-related capabilities of the host platform.
    """

    sdk_int: int = Field(description="Platform API level")
    requires_upfront_grant: bool = Field(
        description="Whether a capture grant must exist before foreground promotion"
    )
    supports_typed_foreground_promotion: bool = Field(
        description="Whether foreground promotion accepts a category tag"
    )
    supports_notification_channels: bool = Field(
        default=True, description="Whether notifications must be posted to a channel"
    )


def capabilities_for_sdk(sdk_int: int) -> CaptureCapabilities:
    """
    Build capabilities for a given API level.

    Args:
        sdk_int: Platform API level

    Returns:
        CaptureCapabilities for that level
    """
    return CaptureCapabilities(
        sdk_int=sdk_int,
        requires_upfront_grant=sdk_int >= UPFRONT_GRANT_SDK,
        supports_typed_foreground_promotion=sdk_int >= TYPED_FOREGROUND_SDK,
        supports_notification_channels=sdk_int >= NOTIFICATION_CHANNELS_SDK,
    )


def detect_capabilities(sdk_int: Optional[int] = None) -> CaptureCapabilities:
    """
    Resolve capabilities from an explicit API level or the environment.

    Reads WIFI_MIRROR_SDK_INT when no level is passed and falls back to
    DEFAULT_SDK_INT.
    """
    if sdk_int is None:
        raw = os.getenv(SDK_ENV_VAR)
        if raw:
            try:
                sdk_int = int(raw)
            except ValueError as exc:
                raise ValueError(f"{SDK_ENV_VAR} must be an integer, got {raw!r}") from exc
        else:
            sdk_int = DEFAULT_SDK_INT
    return capabilities_for_sdk(sdk_int)


@dataclass
class NotificationConfig:
    """
    Channel and notification values used while a session is running.
    """

    channel_id: str = "screen_capture_channel"
    """Notification channel identifier"""

    channel_name: str = "Screen Capture Service"
    """User-visible channel name"""

    title: str = "Screen Sharing"
    """Notification title"""

    text: str = "Sharing your screen..."
    """Notification body"""

    notification_id: int = 1
    """Id the foreground notification is posted under"""


DEFAULT_NOTIFICATION = NotificationConfig()


def get_notification_config() -> NotificationConfig:
    """Get the default notification configuration."""
    return DEFAULT_NOTIFICATION
