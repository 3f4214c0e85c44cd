"""
Color model - 8-bit RGB value with brightness scaling and hex encoding

Also hosts the integer gradient helpers used by the frame synthesis engine.
All arithmetic is integer-only and truncates toward zero, so fades between
two colors land exactly on both endpoints.
"""

import string
from dataclasses import dataclass
from typing import List, Optional


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (Python's // floors)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color, 0-255 per channel.

    Examples:
        red = Color(255, 0, 0)
        dimmed = red.scaled(50)           # Color(127, 0, 0)
        Color.from_hex("00FF00").to_hex() # "00FF00"
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range 0-255: {channel}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        """
        Parse six hex digits ("FF8000", "#ff8000").

        Raises:
            ValueError: if the text is not exactly six hex digits
        """
        color = cls.parse_hex(text)
        if color is None:
            raise ValueError(f"Invalid hex color: {text!r}")
        return color

    @classmethod
    def parse_hex(cls, text: str) -> Optional['Color']:
        """Like from_hex(), but returns None for malformed input."""
        if not isinstance(text, str):
            return None
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        # int(..., 16) alone would also take "0x", "_" and signs
        if len(digits) != 6 or any(ch not in string.hexdigits for ch in digits):
            return None
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    # === PRESETS ===

    @staticmethod
    def black() -> 'Color':
        return BLACK

    @staticmethod
    def white() -> 'Color':
        return Color(255, 255, 255)

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    @staticmethod
    def green() -> 'Color':
        return Color(0, 255, 0)

    @staticmethod
    def blue() -> 'Color':
        return Color(0, 0, 255)

    # === CONVERSIONS ===

    def to_hex(self) -> str:
        """Six upper-case hex digits, the persisted color format."""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    # === BRIGHTNESS SCALING ===

    def scaled(self, brightness: int) -> 'Color':
        """
        Scale every channel by brightness percent, truncating.

        0 gives black, 100 is the identity. Out-of-range brightness is clamped.
        """
        brightness = max(0, min(100, int(brightness)))
        return Color(
            self.r * brightness // 100,
            self.g * brightness // 100,
            self.b * brightness // 100,
        )

    def __str__(self) -> str:
        return f"#{self.to_hex()}"


BLACK = Color(0, 0, 0)


# === GRADIENTS ===

def gradient(start: Color, end: Color, length: int) -> List[Color]:
    """
    Linear integer gradient of `length` colors, inclusive of both endpoints.

    Item i has channel start + i * (end - start) / (length - 1), truncated
    after the multiplication. length <= 1 yields [start].
    """
    if length <= 1:
        return [start]
    span = length - 1
    return [
        Color(
            _clamp_channel(start.r + _trunc_div(i * (end.r - start.r), span)),
            _clamp_channel(start.g + _trunc_div(i * (end.g - start.g), span)),
            _clamp_channel(start.b + _trunc_div(i * (end.b - start.b), span)),
        )
        for i in range(length)
    ]


def next_gradient_step(start: Color, end: Color, length: int) -> Color:
    """Item 1 of gradient(start, end, length): one step away from start."""
    if length <= 1:
        return start
    span = length - 1
    return Color(
        _clamp_channel(start.r + _trunc_div(end.r - start.r, span)),
        _clamp_channel(start.g + _trunc_div(end.g - start.g, span)),
        _clamp_channel(start.b + _trunc_div(end.b - start.b, span)),
    )
