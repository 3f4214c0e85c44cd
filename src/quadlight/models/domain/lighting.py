"""Lighting configuration domain model"""

from dataclasses import dataclass, field, replace
from typing import List, Tuple

from quadlight.models.color import Color
from quadlight.models.enums import MAX_COLORS, LightingMode
from quadlight.models.lighting_params import SPEED, DELAY, BRIGHTNESS


def _default_colors() -> Tuple[Color, ...]:
    return (Color.red(),)


@dataclass(frozen=True)
class LightingConfig:
    """
    Declarative lighting configuration.

    Immutable: every change produces a new instance, which the lighting
    service validates and turns into a fresh frame sequence. The order of
    `colors` is the transition order.

    `colors` is the whole selected palette and survives mode switches, so
    cycle -> solid -> cycle gets the original palette back. Only the first
    `mode.max_colors` of it reach the generators (see active_colors).
    """
    mode: LightingMode = LightingMode.SOLID
    colors: Tuple[Color, ...] = field(default_factory=_default_colors)
    speed: int = SPEED.default
    delay: int = DELAY.default
    brightness: int = BRIGHTNESS.default

    def __post_init__(self):
        # Accept any iterable of colors (lists from JSON, generators from CLI)
        if not isinstance(self.colors, tuple):
            object.__setattr__(self, "colors", tuple(self.colors))

    @property
    def primary_color(self) -> Color:
        """First color, or black when none is selected. UI affordance only."""
        return self.colors[0] if self.colors else Color.black()

    @property
    def active_colors(self) -> Tuple[Color, ...]:
        """The palette prefix the current mode uses (one color for SOLID)."""
        return self.colors[:self.mode.max_colors]

    def validated(self) -> 'LightingConfig':
        """
        Return a copy with every field inside its valid range.

        - speed/delay/brightness clamped to 0-100
        - colors truncated to MAX_COLORS
        """
        return LightingConfig(
            mode=self.mode,
            colors=self.colors[:MAX_COLORS],
            speed=SPEED.clamp(self.speed),
            delay=DELAY.clamp(self.delay),
            brightness=BRIGHTNESS.clamp(self.brightness),
        )

    def is_valid(self) -> bool:
        return self == self.validated()

    def scaled_colors(self) -> Tuple[Color, ...]:
        """Active colors with brightness applied once, as consumed by the generators."""
        return tuple(c.scaled(self.brightness) for c in self.active_colors)

    def with_changes(self, **changes) -> 'LightingConfig':
        return replace(self, **changes)

    def color_hexes(self) -> List[str]:
        return [c.to_hex() for c in self.colors]
