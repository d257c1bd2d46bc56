"""
Method-call surface between the UI and the capture core.

The UI calls ``startForegroundService`` or ``stopForegroundService`` and
receives success, a permission error, or not-implemented. The host shim
calls ``on_permission_result`` when the consent dialog resolves.
"""

import logging
from typing import Any, Optional

from ...config import CaptureCapabilities
from ...schemas import (
    CaptureErrorCode,
    CaptureGrant,
    ChannelReply,
    PermissionOutcome,
    PermissionResult,
    SessionResult,
)
from ...utils.threading.main_loop import call_on_main_loop
from ..permission import MEDIA_PROJECTION_REQUEST_CODE, PermissionCoordinator
from ..session import CaptureSessionManager

logger = logging.getLogger(__name__)

CHANNEL_NAME = "com.wifimirror/service"
START_METHOD = "startForegroundService"
STOP_METHOD = "stopForegroundService"


class ServiceChannel:
    """
    Routes UI method calls to the coordinator and session manager.
    """

    name = CHANNEL_NAME

    def __init__(
        self,
        coordinator: PermissionCoordinator,
        session_manager: CaptureSessionManager,
        capabilities: CaptureCapabilities,
    ):
        self.coordinator = coordinator
        self.session_manager = session_manager
        self.capabilities = capabilities

    async def handle(self, method: str) -> ChannelReply:
        """
        Dispatch a UI method call.

        Args:
            method: Channel method name

        Returns:
            ChannelReply for the UI
        """
        logger.debug("Channel call %s", method)
        if method == START_METHOD:
            if self.capabilities.requires_upfront_grant:
                result = await self.coordinator.request_capture_permission()
                return _reply_for_permission(result)
            return _reply_for_session(self.start_session(None))
        if method == STOP_METHOD:
            return _reply_for_session(self.stop_session())
        return ChannelReply.not_implemented()

    def start_session(self, grant: Optional[CaptureGrant] = None) -> SessionResult:
        return call_on_main_loop(self.session_manager.start, grant)

    def stop_session(self) -> SessionResult:
        return call_on_main_loop(self.session_manager.stop)

    def on_permission_result(
        self,
        result_code: int,
        payload: Any = None,
        request_code: int = MEDIA_PROJECTION_REQUEST_CODE,
    ) -> bool:
        return call_on_main_loop(
            self.coordinator.on_permission_result, result_code, payload, request_code
        )


def _reply_for_session(result: SessionResult) -> ChannelReply:
    if result.success:
        return ChannelReply.success()
    return ChannelReply.error(result.error.value, result.message)


def _reply_for_permission(result: PermissionResult) -> ChannelReply:
    if result.outcome in (PermissionOutcome.DENIED, PermissionOutcome.CANCELLED):
        return ChannelReply.error(
            CaptureErrorCode.PERMISSION_DENIED.value, result.reason or ""
        )
    if result.outcome == PermissionOutcome.ALREADY_PENDING:
        return ChannelReply.error(
            CaptureErrorCode.ALREADY_PENDING.value, result.reason or ""
        )
    if result.session is not None:
        return _reply_for_session(result.session)
    return ChannelReply.success()
