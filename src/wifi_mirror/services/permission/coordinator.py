"""
Screen-capture permission exchange.

Obtains a capture grant through the OS consent dialog and hands it straight
to the session manager, so granting and starting are one user-visible action.
"""

import asyncio
import logging
from typing import Any, Optional

from ...config import CaptureCapabilities
from ...host import PermissionExchange
from ...schemas import (
    PERMISSION_CANCELLED_REASON,
    PERMISSION_DENIED_REASON,
    CaptureGrant,
    PermissionOutcome,
    PermissionResult,
    ResultCode,
    SessionResult,
)
from ..session import CaptureSessionManager

logger = logging.getLogger(__name__)

MEDIA_PROJECTION_REQUEST_CODE = 1001


class PermissionCoordinator:
    """
    Single-outstanding async permission request.

    A second request while one is pending is rejected with ALREADY_PENDING.
    There is no timeout; the request resolves only through
    ``on_permission_result``.
    """

    def __init__(
        self,
        exchange: PermissionExchange,
        session_manager: CaptureSessionManager,
        capabilities: CaptureCapabilities,
    ):
        self._exchange = exchange
        self._session = session_manager
        self._capabilities = capabilities
        self._pending: Optional[asyncio.Future] = None

    @property
    def is_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    async def request_capture_permission(self) -> PermissionResult:
        """
        Ask the user for screen-capture consent.

        Returns:
            PermissionResult. GRANTED results carry the coupled session start
        """
        if not self._capabilities.requires_upfront_grant:
            return PermissionResult(outcome=PermissionOutcome.NOT_REQUIRED)

        if self.is_pending:
            logger.warning("Capture permission request already pending")
            return PermissionResult(
                outcome=PermissionOutcome.ALREADY_PENDING,
                reason="A screen capture permission request is already pending",
            )

        if not self._session.await_grant():
            return PermissionResult(
                outcome=PermissionOutcome.NOT_REQUIRED,
                session=SessionResult.ok("Capture session already running"),
            )

        future = asyncio.get_running_loop().create_future()
        self._pending = future
        try:
            self._exchange.launch_capture_request(MEDIA_PROJECTION_REQUEST_CODE)
        except Exception:
            self._pending = None
            self._session.abandon_grant()
            raise

        try:
            return await future
        except asyncio.CancelledError:
            self._session.abandon_grant()
            raise
        finally:
            if self._pending is future:
                self._pending = None

    def on_permission_result(
        self,
        result_code: int,
        payload: Any = None,
        request_code: int = MEDIA_PROJECTION_REQUEST_CODE,
    ) -> bool:
        """
        Deliver the consent dialog's answer.

        Args:
            result_code: ResultCode reported by the exchange
            payload: Opaque capture descriptor, None when absent
            request_code: Request code the answer belongs to

        Returns:
            True if the answer resolved a pending request
        """
        if request_code != MEDIA_PROJECTION_REQUEST_CODE:
            return False
        future = self._pending
        if future is None or future.done():
            logger.warning("Permission result %s with no pending request", result_code)
            return False

        if result_code == ResultCode.OK and payload:
            grant = CaptureGrant(result_code=result_code, payload=payload)
            try:
                session = self._session.start(grant)
            except Exception as exc:
                self._pending = None
                future.set_exception(exc)
                raise
            result = PermissionResult(
                outcome=PermissionOutcome.GRANTED, grant=grant, session=session
            )
            logger.info("Capture permission granted")
        elif result_code == ResultCode.CANCELED:
            self._session.abandon_grant()
            result = PermissionResult(
                outcome=PermissionOutcome.CANCELLED, reason=PERMISSION_CANCELLED_REASON
            )
            logger.info("Capture permission dialog dismissed")
        else:
            self._session.abandon_grant()
            result = PermissionResult(
                outcome=PermissionOutcome.DENIED, reason=PERMISSION_DENIED_REASON
            )
            logger.info("Capture permission denied (result %s)", result_code)

        self._pending = None
        future.set_result(result)
        return True
