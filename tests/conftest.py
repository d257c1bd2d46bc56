"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from wifi_mirror.config import capabilities_for_sdk  # noqa: E402
from wifi_mirror.host import SimulatedHost  # noqa: E402
from wifi_mirror.services import create_service_channel  # noqa: E402


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        if "permission" in item.nodeid.lower():
            item.add_marker("permission")
        if "session" in item.nodeid.lower():
            item.add_marker("session")


@pytest.fixture
def host():
    return SimulatedHost()


@pytest.fixture
def modern():
    """Capabilities of a platform that requires an upfront grant."""
    return capabilities_for_sdk(34)


@pytest.fixture
def legacy():
    """Capabilities of a platform that starts capture without a grant."""
    return capabilities_for_sdk(30)


@pytest.fixture
def channel(host, modern):
    return create_service_channel(host, modern)


@pytest.fixture
def legacy_channel(host, legacy):
    return create_service_channel(host, legacy)
