"""Settings store - persists the lighting configuration as a JSON key/value file"""

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from quadlight.models.color import Color
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode, LogCategory
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.STATE)

KEY_MODE = "lightingMode"
KEY_COLORS = "colors"
KEY_SPEED = "speed"
KEY_DELAY = "delay"
KEY_BRIGHTNESS = "brightness"


def config_to_dict(config: LightingConfig) -> Dict[str, Any]:
    return {
        KEY_MODE: config.mode.value,
        KEY_COLORS: config.color_hexes(),
        KEY_SPEED: config.speed,
        KEY_DELAY: config.delay,
        KEY_BRIGHTNESS: config.brightness,
    }


def config_from_dict(data: Dict[str, Any], defaults: Optional[LightingConfig] = None) -> LightingConfig:
    """
    Rebuild a LightingConfig field by field.

    Absent or corrupt fields keep their default; they never stop the others
    from loading. Unparseable colors are dropped, and if none survive the
    default colors are kept.
    """
    config = defaults or LightingConfig()
    changes: Dict[str, Any] = {}

    if KEY_MODE in data:
        try:
            changes["mode"] = LightingMode.from_name(data[KEY_MODE])
        except ValueError:
            log.warn("Ignoring corrupt persisted mode", value=data[KEY_MODE])

    if KEY_COLORS in data:
        raw = data[KEY_COLORS]
        if isinstance(raw, list):
            parsed = [c for c in (Color.parse_hex(h) for h in raw) if c is not None]
            if len(parsed) != len(raw):
                log.warn("Dropped unparseable persisted colors", dropped=len(raw) - len(parsed))
            if parsed:
                changes["colors"] = tuple(parsed)
        else:
            log.warn("Ignoring corrupt persisted colors", value=raw)

    for key in (KEY_SPEED, KEY_DELAY, KEY_BRIGHTNESS):
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass; "true" is not a speed
        if isinstance(value, int) and not isinstance(value, bool):
            changes[key] = value
        else:
            log.warn(f"Ignoring corrupt persisted {key}", value=value)

    return config.with_changes(**changes) if changes else config


class SettingsStore:
    """
    JSON-backed key/value persistence for the lighting configuration.

    Keys: lightingMode, colors (6-hex-digit strings), speed, delay, brightness.

    Example:
        store = SettingsStore("~/.config/quadlight/state.json")
        config = store.load()
        store.save(config.with_changes(speed=80))
    """

    def __init__(self, path: Union[str, Path], save_on_change: bool = True):
        self.path = Path(path).expanduser()
        self.save_on_change = save_on_change
        self._lock = threading.Lock()

    def load(self, defaults: Optional[LightingConfig] = None) -> LightingConfig:
        """Load persisted settings; a missing or unreadable file yields the defaults."""
        defaults = defaults or LightingConfig()

        if not self.path.exists():
            log.info("No saved settings, using defaults", path=str(self.path))
            return defaults

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as ex:
            log.error("Failed to read saved settings", path=str(self.path), error=str(ex))
            return defaults

        if not isinstance(data, dict):
            log.error("Saved settings are not a key/value object", path=str(self.path))
            return defaults

        config = config_from_dict(data, defaults)
        log.info("Loaded saved settings", mode=config.mode.value, colors=len(config.colors))
        return config

    def save(self, config: LightingConfig) -> bool:
        """
        Persist config. Errors are logged, never raised.

        Returns:
            True if the file was written
        """
        if not self.save_on_change:
            log.debug("Auto-save disabled, skipping settings save")
            return False

        data = config_to_dict(config)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self.path)
        except OSError as ex:
            log.error("Failed to save settings", path=str(self.path), error=str(ex))
            return False

        log.debug("Settings saved", path=str(self.path))
        return True
