"""
ConfigManager: YAML loading and factory-default fallback
"""

import pytest

from quadlight.hardware import qc2s_protocol as proto
from quadlight.managers.config_manager import AppConfig, ConfigManager, parse_log_level
from quadlight.models.enums import LogLevel


def test_packaged_config_loads():
    config = ConfigManager()
    app = config.load()

    assert app.device.vendor_id == proto.VENDOR_ID
    assert app.device.product_id == proto.PRODUCT_ID
    assert app.device.interface == 1
    assert app.stream.max_connect_attempts is None
    assert app.api.port == 8000
    assert app.logging.level is LogLevel.INFO


def test_user_file_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "device:\n"
        "  virtual: true\n"
        "stream:\n"
        "  retry_backoff_s: 0.5\n"
        "  max_connect_attempts: 4\n"
        "logging:\n"
        "  level: warning\n"
    )
    config = ConfigManager(path)
    config.load()

    assert config.device.virtual is True
    assert config.stream.retry_backoff_s == 0.5
    assert config.stream.max_connect_attempts == 4
    assert config.logging.level is LogLevel.WARN
    # untouched sections keep their defaults
    assert config.api.host == "127.0.0.1"


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("api:\n  port: 9000\n  colour: blue\n")
    config = ConfigManager(path)
    config.load()
    assert config.api.port == 9000


def test_missing_file_falls_back_to_factory_defaults(tmp_path):
    config = ConfigManager(tmp_path / "nope.yaml")
    app = config.load()
    assert app.api.port == 8000
    assert config.data["device"]["inter_group_ms"] == 45


def test_invalid_yaml_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("device: [unclosed\n")
    assert ConfigManager(path).load().device.ack_timeout_ms == 100


def test_bad_log_level_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: LOUD\napi:\n  port: 9100\n")
    config = ConfigManager(path)
    config.load()
    assert config.api.port == 8000


def test_nothing_readable_uses_builtin_defaults(tmp_path):
    config = ConfigManager(tmp_path / "a.yaml", defaults_path=tmp_path / "b.yaml")
    assert config.load() == AppConfig()
    assert config.data == {}


def test_resolved_state_path_expands_user():
    config = ConfigManager()
    config.load()
    assert "~" not in str(config.state.resolved_path)


class TestParseLogLevel:
    @pytest.mark.parametrize("value,expected", [
        ("debug", LogLevel.DEBUG),
        ("WARNING", LogLevel.WARN),
        ("warn", LogLevel.WARN),
        (None, LogLevel.INFO),
        (LogLevel.ERROR, LogLevel.ERROR),
    ])
    def test_accepted(self, value, expected):
        assert parse_log_level(value) is expected

    def test_rejected(self):
        with pytest.raises(ValueError):
            parse_log_level("LOUD")
