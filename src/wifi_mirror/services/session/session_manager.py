"""
Capture session lifecycle.

Owns the single capture session of the process: foreground promotion with an
ongoing notification, the held capture grant, and its release on stop or
host teardown.
"""

import logging
import threading
from typing import Optional

from ...config import CaptureCapabilities, NotificationConfig, get_notification_config
from ...host import ForegroundHost, PromotionRefusedError
from ...schemas import (
    CaptureErrorCode,
    CaptureGrant,
    ForegroundCategory,
    Notification,
    NotificationChannel,
    SessionResult,
    SessionSnapshot,
    SessionState,
)

logger = logging.getLogger(__name__)


class CaptureSessionManager:
    """
    State machine for the capture session.

    IDLE [-> AWAITING_GRANT] -> STARTING -> RUNNING -> STOPPED -> IDLE. A
    failed promotion goes from STARTING back to IDLE. Transitions are serialized by a lock so at
    most one session is ever RUNNING.
    """

    def __init__(
        self,
        host: ForegroundHost,
        capabilities: CaptureCapabilities,
        notification_config: Optional[NotificationConfig] = None,
    ) -> None:
        self._host = host
        self._capabilities = capabilities
        self._notification = notification_config or get_notification_config()
        self._lock = threading.RLock()
        self._state = SessionState.IDLE
        self._grant: Optional[CaptureGrant] = None
        self._category: Optional[ForegroundCategory] = None
        self._channel_created = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def grant(self) -> Optional[CaptureGrant]:
        return self._grant

    @property
    def is_running(self) -> bool:
        return self._state == SessionState.RUNNING

    def snapshot(self) -> SessionSnapshot:
        """Get current session snapshot."""
        with self._lock:
            return SessionSnapshot(
                state=self._state,
                has_grant=self._grant is not None,
                category=self._category,
            )

    def await_grant(self) -> bool:
        """
        Mark the session as waiting on the consent dialog.

        Returns:
            False if a session is already running or starting
        """
        with self._lock:
            if self._state in (SessionState.IDLE, SessionState.AWAITING_GRANT):
                self._state = SessionState.AWAITING_GRANT
                return True
            return False

    def abandon_grant(self) -> None:
        """Return to IDLE after the consent dialog was declined."""
        with self._lock:
            if self._state == SessionState.AWAITING_GRANT:
                self._state = SessionState.IDLE

    def start(self, grant: Optional[CaptureGrant] = None) -> SessionResult:
        """
        Start the capture session and promote to foreground.

        Args:
            grant: Capture grant, mandatory when the platform requires one

        Returns:
            SessionResult; NO_GRANT or PROMOTION_REFUSED leave the session IDLE
        """
        with self._lock:
            if self._state == SessionState.RUNNING:
                logger.info("Capture session already running")
                return SessionResult.ok("Capture session already running")
            if self._state not in (SessionState.IDLE, SessionState.AWAITING_GRANT):
                logger.warning("Start rejected while session is %s", self._state.value)
                return SessionResult.fail(
                    CaptureErrorCode.ALREADY_PENDING,
                    f"Capture session is {self._state.value}",
                )
            if grant is None and self._capabilities.requires_upfront_grant:
                self._state = SessionState.IDLE
                logger.warning("Start rejected: capture grant required")
                return SessionResult.fail(
                    CaptureErrorCode.NO_GRANT,
                    "Screen capture permission must be granted before starting",
                )

            self._state = SessionState.STARTING
            self._grant = grant
            category = self._category_for(grant)

            notification = Notification(
                channel_id=self._notification.channel_id,
                title=self._notification.title,
                text=self._notification.text,
                ongoing=True,
            )
            try:
                self._ensure_channel()
                self._host.start_foreground(
                    self._notification.notification_id, notification, category
                )
            except PromotionRefusedError as exc:
                self._grant = None
                self._state = SessionState.IDLE
                logger.warning("Foreground promotion refused: %s", exc)
                return SessionResult.fail(CaptureErrorCode.PROMOTION_REFUSED, str(exc))
            except Exception:
                self._grant = None
                self._state = SessionState.IDLE
                raise

            self._category = category
            self._state = SessionState.RUNNING
            logger.info("Capture session running (%s)", category.value)
            return SessionResult.ok()

    def stop(self) -> SessionResult:
        """
        Stop the session. Stopping an idle session is a no-op.

        The held grant is cleared unconditionally.
        """
        with self._lock:
            if self._state != SessionState.RUNNING:
                self._grant = None
                return SessionResult.ok("No capture session running")
            self._release()
            return SessionResult.ok()

    def on_destroy(self) -> None:
        """Host teardown: release everything as stop() would."""
        with self._lock:
            logger.info("Host destroyed capture session (state %s)", self._state.value)
            if self._state == SessionState.RUNNING:
                self._release()
            else:
                self._grant = None
                self._state = SessionState.IDLE

    def _release(self) -> None:
        self._host.stop_foreground(self._notification.notification_id)
        self._state = SessionState.STOPPED
        self._grant = None
        self._category = None
        self._state = SessionState.IDLE
        logger.info("Capture session stopped")

    def _ensure_channel(self) -> None:
        if self._channel_created or not self._capabilities.supports_notification_channels:
            return
        self._host.create_notification_channel(
            NotificationChannel(
                channel_id=self._notification.channel_id,
                name=self._notification.channel_name,
            )
        )
        self._channel_created = True

    def _category_for(self, grant: Optional[CaptureGrant]) -> ForegroundCategory:
        if grant is not None and self._capabilities.supports_typed_foreground_promotion:
            return ForegroundCategory.MEDIA_PROJECTION
        return ForegroundCategory.NONE
