"""
Tagged results returned to the invoking UI action.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .capture import CaptureGrant

PERMISSION_DENIED_REASON = "User denied screen capture permission"
PERMISSION_CANCELLED_REASON = "User dismissed the screen capture dialog"


class CaptureErrorCode(str, Enum):
    """Error taxonomy surfaced to callers."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    NO_GRANT = "NO_GRANT"
    PROMOTION_REFUSED = "PROMOTION_REFUSED"
    ALREADY_PENDING = "ALREADY_PENDING"


class SessionResult(BaseModel):
    """
    Result of a session start or stop.
    """

    success: bool = Field(description="Whether the operation succeeded")
    error: Optional[CaptureErrorCode] = Field(
        default=None, description="Error code when the operation failed"
    )
    message: str = Field(default="", description="Human-readable detail")

    @classmethod
    def ok(cls, message: str = "") -> "SessionResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: CaptureErrorCode, message: str) -> "SessionResult":
        return cls(success=False, error=error, message=message)


class PermissionOutcome(str, Enum):
    """Outcome of a capture permission request."""

    GRANTED = "granted"
    DENIED = "denied"
    CANCELLED = "cancelled"
    NOT_REQUIRED = "not_required"
    ALREADY_PENDING = "already_pending"


class PermissionResult(BaseModel):
    """
    Result of ``PermissionCoordinator.request_capture_permission``.

    A granted result also carries the outcome of the session start that was
    coupled to it.
    """

    outcome: PermissionOutcome
    grant: Optional[CaptureGrant] = Field(default=None, exclude=True, repr=False)
    reason: Optional[str] = None
    session: Optional[SessionResult] = None

    @property
    def granted(self) -> bool:
        return self.outcome == PermissionOutcome.GRANTED


class ReplyKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "not_implemented"


class ChannelReply(BaseModel):
    """Reply delivered to the UI for a channel method call."""

    kind: ReplyKind
    code: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "ChannelReply":
        return cls(kind=ReplyKind.SUCCESS)

    @classmethod
    def error(cls, code: str, message: str) -> "ChannelReply":
        return cls(kind=ReplyKind.ERROR, code=code, message=message)

    @classmethod
    def not_implemented(cls) -> "ChannelReply":
        return cls(kind=ReplyKind.NOT_IMPLEMENTED)
