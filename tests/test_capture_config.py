"""
Tests for capability resolution and notification defaults.
"""

import pytest

from wifi_mirror.config import (
    capabilities_for_sdk,
    detect_capabilities,
    get_notification_config,
)
from wifi_mirror.config.capture_config import SDK_ENV_VAR


class TestCapabilities:
    """API level thresholds."""

    @pytest.mark.parametrize(
        "sdk_int, upfront, typed, channels",
        [
            (24, False, False, False),
            (26, False, False, True),
            (29, False, True, True),
            (33, False, True, True),
            (34, True, True, True),
            (35, True, True, True),
        ],
    )
    def test_thresholds(self, sdk_int, upfront, typed, channels):
        caps = capabilities_for_sdk(sdk_int)

        assert caps.sdk_int == sdk_int
        assert caps.requires_upfront_grant is upfront
        assert caps.supports_typed_foreground_promotion is typed
        assert caps.supports_notification_channels is channels

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv(SDK_ENV_VAR, "29")

        assert detect_capabilities(34).sdk_int == 34

    def test_environment_level(self, monkeypatch):
        monkeypatch.setenv(SDK_ENV_VAR, "29")

        caps = detect_capabilities()

        assert caps.sdk_int == 29
        assert not caps.requires_upfront_grant

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv(SDK_ENV_VAR, raising=False)

        assert detect_capabilities().requires_upfront_grant

    def test_invalid_environment_level(self, monkeypatch):
        monkeypatch.setenv(SDK_ENV_VAR, "upside-down-cake")

        with pytest.raises(ValueError):
            detect_capabilities()


def test_notification_defaults():
    config = get_notification_config()

    assert config.channel_id == "screen_capture_channel"
    assert config.channel_name == "Screen Capture Service"
    assert config.notification_id == 1
