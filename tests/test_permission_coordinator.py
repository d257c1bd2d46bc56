"""
Tests for the capture permission exchange.
"""

import asyncio

import pytest

from wifi_mirror.schemas import (
    PERMISSION_DENIED_REASON,
    PermissionOutcome,
    ResultCode,
    SessionState,
)
from wifi_mirror.services import CaptureSessionManager, PermissionCoordinator
from wifi_mirror.services.permission import MEDIA_PROJECTION_REQUEST_CODE


@pytest.fixture
def manager(host, modern):
    return CaptureSessionManager(host, modern)


@pytest.fixture
def coordinator(host, manager, modern):
    return PermissionCoordinator(host, manager, modern)


async def open_dialog(coordinator):
    task = asyncio.create_task(coordinator.request_capture_permission())
    await asyncio.sleep(0)
    return task


class TestPermissionRequest:
    """Request/response exchange on a platform requiring consent."""

    @pytest.mark.asyncio
    async def test_granted_starts_session(self, host, manager, coordinator):
        task = await open_dialog(coordinator)

        assert host.launched_requests == [MEDIA_PROJECTION_REQUEST_CODE]
        assert manager.state == SessionState.AWAITING_GRANT

        assert coordinator.on_permission_result(ResultCode.OK, object())
        result = await task

        assert result.outcome == PermissionOutcome.GRANTED
        assert result.session.success
        assert manager.state == SessionState.RUNNING
        assert manager.grant is result.grant
        assert host.post_count == 1

    @pytest.mark.asyncio
    async def test_session_runs_before_request_completes(self, manager, coordinator):
        task = await open_dialog(coordinator)

        coordinator.on_permission_result(ResultCode.OK, object())

        assert manager.is_running
        assert not task.done()
        await task

    @pytest.mark.asyncio
    async def test_denied_leaves_idle(self, host, manager, coordinator):
        task = await open_dialog(coordinator)

        coordinator.on_permission_result(ResultCode.FIRST_USER, None)
        result = await task

        assert result.outcome == PermissionOutcome.DENIED
        assert result.reason == "User denied screen capture permission"
        assert result.reason == PERMISSION_DENIED_REASON
        assert manager.state == SessionState.IDLE
        assert host.notifications == {}

    @pytest.mark.asyncio
    async def test_ok_without_payload_is_denied(self, manager, coordinator):
        task = await open_dialog(coordinator)

        coordinator.on_permission_result(ResultCode.OK, None)
        result = await task

        assert result.outcome == PermissionOutcome.DENIED
        assert manager.grant is None

    @pytest.mark.asyncio
    async def test_cancelled_leaves_idle(self, manager, coordinator):
        task = await open_dialog(coordinator)

        coordinator.on_permission_result(ResultCode.CANCELED)
        result = await task

        assert result.outcome == PermissionOutcome.CANCELLED
        assert manager.state == SessionState.IDLE

    @pytest.mark.asyncio
    async def test_second_request_rejected_while_pending(self, host, coordinator):
        first = await open_dialog(coordinator)

        second = await coordinator.request_capture_permission()

        assert second.outcome == PermissionOutcome.ALREADY_PENDING
        assert host.launched_requests == [MEDIA_PROJECTION_REQUEST_CODE]
        assert coordinator.is_pending

        coordinator.on_permission_result(ResultCode.OK, object())
        assert (await first).granted

    @pytest.mark.asyncio
    async def test_request_while_running_does_not_reopen_dialog(
        self, host, coordinator
    ):
        task = await open_dialog(coordinator)
        coordinator.on_permission_result(ResultCode.OK, object())
        await task

        again = await coordinator.request_capture_permission()

        assert again.session.success
        assert host.launched_requests == [MEDIA_PROJECTION_REQUEST_CODE]
        assert host.post_count == 1

    @pytest.mark.asyncio
    async def test_foreign_request_code_ignored(self, coordinator):
        task = await open_dialog(coordinator)

        assert not coordinator.on_permission_result(ResultCode.OK, object(), 7)
        assert not task.done()

        coordinator.on_permission_result(ResultCode.CANCELED)
        await task

    def test_result_without_request_ignored(self, manager, coordinator):
        assert not coordinator.on_permission_result(ResultCode.OK, object())
        assert manager.state == SessionState.IDLE

    @pytest.mark.asyncio
    async def test_launch_failure_clears_pending(self, host, manager, coordinator):
        def broken(request_code):
            raise RuntimeError("no activity to handle intent")

        host.launch_capture_request = broken

        with pytest.raises(RuntimeError):
            await coordinator.request_capture_permission()

        assert not coordinator.is_pending
        assert manager.state == SessionState.IDLE

    @pytest.mark.asyncio
    async def test_host_failure_on_grant_resolves_request(self, host, manager, coordinator):
        """A crashing foreground host must not leave the request hanging."""

        def crashing(notification_id, notification, category):
            raise RuntimeError("notification service unavailable")

        host.start_foreground = crashing
        task = await open_dialog(coordinator)

        with pytest.raises(RuntimeError):
            coordinator.on_permission_result(ResultCode.OK, object())

        with pytest.raises(RuntimeError):
            await task
        assert not coordinator.is_pending
        assert manager.state == SessionState.IDLE
        assert manager.grant is None

        retry = await open_dialog(coordinator)
        assert host.launched_requests == [MEDIA_PROJECTION_REQUEST_CODE] * 2
        coordinator.on_permission_result(ResultCode.CANCELED)
        assert (await retry).outcome == PermissionOutcome.CANCELLED

    @pytest.mark.asyncio
    async def test_cancelled_caller_returns_session_to_idle(self, manager, coordinator):
        task = await open_dialog(coordinator)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert manager.state == SessionState.IDLE
        assert not coordinator.is_pending
        assert not coordinator.on_permission_result(ResultCode.OK, object())
        assert not manager.is_running

        retry = await open_dialog(coordinator)
        coordinator.on_permission_result(ResultCode.OK, object())
        assert (await retry).granted

    @pytest.mark.asyncio
    async def test_grant_then_teardown_requires_new_grant(self, manager, coordinator):
        task = await open_dialog(coordinator)
        coordinator.on_permission_result(ResultCode.OK, object())
        await task

        manager.on_destroy()

        assert manager.start().error is not None


class TestNoUpfrontGrant:
    """Platforms that start capture without consent."""

    @pytest.mark.asyncio
    async def test_not_required(self, host, legacy):
        manager = CaptureSessionManager(host, legacy)
        coordinator = PermissionCoordinator(host, manager, legacy)

        result = await coordinator.request_capture_permission()

        assert result.outcome == PermissionOutcome.NOT_REQUIRED
        assert host.launched_requests == []
