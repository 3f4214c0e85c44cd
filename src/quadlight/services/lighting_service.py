"""Lighting service - the configuration surface of the controller"""

import threading
from typing import Iterable, List, Optional

from quadlight.engine.frame_cursor import FrameCursor
from quadlight.models.color import Color
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode, LogCategory
from quadlight.models.frame import Frame
from quadlight.services.settings_store import SettingsStore
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


class LightingService:
    """
    Owns the current LightingConfig and keeps the frame cursor in sync with it.

    Every change goes through update_configuration(), which validates the new
    configuration, resynthesizes the frame sequence and persists the result as
    one explicit step. The set_* helpers are thin wrappers around it.

    Concurrent writers (API requests, CLI) are serialised by a lock; the
    streaming worker never takes it, it only reads from the cursor.
    """

    def __init__(
        self,
        cursor: FrameCursor,
        store: Optional[SettingsStore] = None,
        initial: Optional[LightingConfig] = None,
    ):
        """
        Args:
            cursor: Frame cursor read by the streaming worker
            store: Settings persistence (None = don't persist)
            initial: Starting configuration (default: persisted settings or defaults)
        """
        self.cursor = cursor
        self.store = store
        self._lock = threading.RLock()

        if initial is None:
            initial = store.load() if store else LightingConfig()

        self._config = initial.validated()
        self.cursor.regenerate(self._config)

    # === Queries ===

    @property
    def config(self) -> LightingConfig:
        return self._config

    @property
    def primary_color(self) -> Color:
        return self._config.primary_color

    @property
    def frame_count(self) -> int:
        return len(self.cursor)

    def preview(self, limit: Optional[int] = None) -> List[Frame]:
        """First `limit` frames of the installed sequence (all when None)."""
        frames = self.cursor.snapshot()
        return list(frames if limit is None else frames[:max(0, limit)])

    # === Updates ===

    def update_configuration(self, new_config: LightingConfig) -> LightingConfig:
        """
        Validate, resynthesize, and persist a new configuration.

        Returns:
            The configuration actually applied (after clamping/truncation)
        """
        accepted = new_config.validated()
        if accepted != new_config:
            log.warn(
                "Configuration adjusted to valid ranges",
                requested=_describe(new_config),
                applied=_describe(accepted),
            )

        with self._lock:
            frames = self.cursor.regenerate(accepted)
            self._config = accepted

            log.info(
                "Lighting updated",
                mode=accepted.mode.value,
                colors=" ".join(accepted.color_hexes()) or "-",
                frames=frames,
            )

            if self.store is not None:
                self.store.save(accepted)

        return accepted

    def update(self, **changes) -> LightingConfig:
        """Apply a partial change to the current configuration."""
        with self._lock:
            return self.update_configuration(self._config.with_changes(**changes))

    def set_mode(self, mode: LightingMode) -> LightingConfig:
        return self.update(mode=mode)

    def set_colors(self, colors: Iterable[Color]) -> LightingConfig:
        return self.update(colors=tuple(colors))

    def set_speed(self, speed: int) -> LightingConfig:
        return self.update(speed=speed)

    def set_delay(self, delay: int) -> LightingConfig:
        return self.update(delay=delay)

    def set_brightness(self, brightness: int) -> LightingConfig:
        return self.update(brightness=brightness)


def _describe(config: LightingConfig) -> str:
    return (
        f"{config.mode.value} colors={len(config.colors)} "
        f"speed={config.speed} delay={config.delay} brightness={config.brightness}"
    )
