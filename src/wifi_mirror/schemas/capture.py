"""
Capture grant, session and notification models.
"""

from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResultCode(IntEnum):
    """Result codes delivered by the permission exchange callback."""

    OK = -1
    CANCELED = 0
    FIRST_USER = 1


class SessionState(str, Enum):
    """Lifecycle states of the capture session."""

    IDLE = "idle"
    AWAITING_GRANT = "awaiting_grant"
    STARTING = "starting"
    RUNNING = "running"
    STOPPED = "stopped"


class ForegroundCategory(str, Enum):
    """Category tag attached to a foreground promotion."""

    NONE = "none"
    MEDIA_PROJECTION = "media_projection"


class Importance(IntEnum):
    """Notification channel importance levels."""

    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4


class CaptureGrant(BaseModel):
    """
    Proof that the user authorized screen capture.

    Valid only for the process that received it. The payload is the opaque
    descriptor handed back by the permission dialog and is never serialized.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    result_code: int = Field(description="Result code of the permission exchange")
    payload: Any = Field(
        exclude=True, repr=False, description="Opaque OS-issued capture descriptor"
    )


class Notification(BaseModel):
    """Persistent notification shown while capture is active."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    title: str
    text: str
    ongoing: bool = True
    importance: Importance = Importance.DEFAULT


class NotificationChannel(BaseModel):
    """Notification channel registered with the host."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    name: str
    importance: Importance = Importance.DEFAULT


class SessionSnapshot(BaseModel):
    """Immutable view of the session at a point in time."""

    model_config = ConfigDict(frozen=True)

    state: SessionState
    has_grant: bool
    category: Optional[ForegroundCategory] = None
