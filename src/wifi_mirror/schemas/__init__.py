"""
Pydantic schemas for grants, session state and tagged results.
"""

from .capture import (
    CaptureGrant,
    ForegroundCategory,
    Importance,
    Notification,
    NotificationChannel,
    ResultCode,
    SessionSnapshot,
    SessionState,
)
from .responses import (
    PERMISSION_CANCELLED_REASON,
    PERMISSION_DENIED_REASON,
    CaptureErrorCode,
    ChannelReply,
    PermissionOutcome,
    PermissionResult,
    ReplyKind,
    SessionResult,
)

__all__ = [
    "CaptureGrant",
    "ForegroundCategory",
    "Importance",
    "Notification",
    "NotificationChannel",
    "ResultCode",
    "SessionSnapshot",
    "SessionState",
    "PERMISSION_CANCELLED_REASON",
    "PERMISSION_DENIED_REASON",
    "CaptureErrorCode",
    "ChannelReply",
    "PermissionOutcome",
    "PermissionResult",
    "ReplyKind",
    "SessionResult",
]
