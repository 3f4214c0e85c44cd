"""Lighting parameter definitions - stateless ranges with clamping"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntRangeParam:
    """Integer parameter with min/max/default - stateless definition."""

    key: str
    label: str
    min: int
    max: int
    default: int

    def clamp(self, value: int) -> int:
        """Clamp to [min, max]"""
        return max(self.min, min(self.max, int(value)))


SPEED = IntRangeParam(key="speed", label="Speed", min=0, max=100, default=50)
DELAY = IntRangeParam(key="delay", label="Delay", min=0, max=100, default=10)
BRIGHTNESS = IntRangeParam(key="brightness", label="Brightness", min=0, max=100, default=100)
