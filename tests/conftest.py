import time

import pytest

from quadlight.engine.frame_cursor import FrameCursor
from quadlight.hardware.virtual_transport import VirtualTransport
from quadlight.managers.config_manager import StreamConfig
from quadlight.models.color import Color
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode, LogLevel
from quadlight.services.lighting_service import LightingService
from quadlight.services.settings_store import SettingsStore
from quadlight.utils.logger import configure_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Only errors reach stdout while tests run."""
    configure_logger(LogLevel.ERROR, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def red():
    return Color.red()


@pytest.fixture
def green():
    return Color.green()


@pytest.fixture
def blue():
    return Color.blue()


@pytest.fixture
def cycle_config(red, blue):
    return LightingConfig(mode=LightingMode.CYCLE, colors=(red, blue), speed=100)


@pytest.fixture
def cursor():
    return FrameCursor()


@pytest.fixture
def virtual_transport():
    return VirtualTransport()


@pytest.fixture
def fast_stream():
    """Reconnect policy with a backoff short enough for tests."""
    return StreamConfig(retry_backoff_s=0.01)


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "state.json"


@pytest.fixture
def store(settings_path):
    return SettingsStore(settings_path)


@pytest.fixture
def lighting_service(cursor, store):
    return LightingService(cursor, store)


def _wait_until(predicate, timeout=2.0, interval=0.005):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def wait_until():
    """Poll a predicate until it is truthy or the timeout expires."""
    return _wait_until
