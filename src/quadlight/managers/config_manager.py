"""
Config Manager

Loads config.yaml and exposes typed, immutable configuration sections.
Falls back to the packaged factory defaults when the file is missing or broken.
"""

import yaml
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from quadlight.hardware import qc2s_protocol as proto
from quadlight.models.enums import LogCategory, LogLevel
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

CONFIG_DIR = Path(__file__).parent.parent / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"
FACTORY_DEFAULTS_PATH = CONFIG_DIR / "factory_defaults.yaml"

T = TypeVar("T")


@dataclass(frozen=True)
class DeviceConfig:
    """USB identity, pacing, and driver selection"""
    vendor_id: int = proto.VENDOR_ID
    product_id: int = proto.PRODUCT_ID
    interface: int = proto.INTERFACE
    inter_group_ms: int = proto.INTER_GROUP_MS
    ack_timeout_ms: int = proto.ACK_TIMEOUT_MS
    virtual: bool = False


@dataclass(frozen=True)
class StreamConfig:
    """Streaming worker reconnect policy"""
    retry_backoff_s: float = 2.0
    max_connect_attempts: Optional[int] = None   # None = retry forever


@dataclass(frozen=True)
class ApiConfig:
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(frozen=True)
class StateConfig:
    """Persisted lighting settings"""
    path: str = "~/.config/quadlight/state.json"
    save_on_change: bool = True

    @property
    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    device: DeviceConfig = field(default_factory=DeviceConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    state: StateConfig = field(default_factory=StateConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_section(cls: Type[T], raw: Any, section: str) -> T:
    """Build a section dataclass from a YAML mapping, ignoring unknown keys."""
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        log.warn(f"Section '{section}' is not a mapping, using defaults")
        return cls()

    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        log.warn(f"Unknown keys in '{section}'", keys=str(sorted(unknown)))
    return cls(**{k: v for k, v in raw.items() if k in known})


def parse_log_level(value: Union[str, LogLevel, None]) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    if value is None:
        return LogLevel.INFO
    name = str(value).strip().upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return LogLevel[name]
    except KeyError:
        raise ValueError(f"Invalid LogLevel: {value}")


class ConfigManager:
    """
    Configuration manager

    Example:
        config = ConfigManager()
        config.load()

        backoff = config.stream.retry_backoff_s
        transport = create_transport(config.device)
    """

    def __init__(self, config_path: Union[str, Path, None] = None,
                 defaults_path: Union[str, Path] = FACTORY_DEFAULTS_PATH):
        """
        Args:
            config_path: Path to config.yaml (default: packaged config.yaml)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.app_config = AppConfig()

    def load(self) -> AppConfig:
        """
        Load YAML configuration

        Process:
        1. Load config.yaml and build typed sections
        2. Fall back to factory_defaults.yaml on any failure
        3. Fall back to dataclass defaults if even that fails

        Returns:
            AppConfig
        """
        try:
            self.data = self._read_yaml(self.config_path)
            self.app_config = self._build(self.data)
            log.info("Configuration loaded", path=str(self.config_path))
        except (OSError, yaml.YAMLError, TypeError, ValueError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            try:
                self.data = self._read_yaml(self.factory_defaults_path)
                self.app_config = self._build(self.data)
            except (OSError, yaml.YAMLError, TypeError, ValueError) as ex2:
                log.error("Factory defaults unusable, using built-in defaults", error=str(ex2))
                self.data = {}
                self.app_config = AppConfig()

        return self.app_config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Top level of {path.name} must be a mapping")
        return data

    @staticmethod
    def _build(data: Dict[str, Any]) -> AppConfig:
        logging_raw = dict(data.get("logging") or {})
        if "level" in logging_raw:
            logging_raw["level"] = parse_log_level(logging_raw["level"])

        return AppConfig(
            device=_build_section(DeviceConfig, data.get("device"), "device"),
            stream=_build_section(StreamConfig, data.get("stream"), "stream"),
            api=_build_section(ApiConfig, data.get("api"), "api"),
            state=_build_section(StateConfig, data.get("state"), "state"),
            logging=_build_section(LoggingConfig, logging_raw, "logging"),
        )

    # ===== Section access =====

    @property
    def device(self) -> DeviceConfig:
        return self.app_config.device

    @property
    def stream(self) -> StreamConfig:
        return self.app_config.stream

    @property
    def api(self) -> ApiConfig:
        return self.app_config.api

    @property
    def state(self) -> StateConfig:
        return self.app_config.state

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging
