"""
Frame models for the two-zone device.

✔ Frame         - one hardware update: (upper, lower) color pair
✔ FrameSequence - finite, periodic, precomputed tuple of frames
"""

from dataclasses import dataclass
from typing import Tuple

from quadlight.models.color import Color, BLACK


@dataclass(frozen=True)
class Frame:
    """
    EXACTLY one hardware update: upper zone color + lower zone color.
    """

    upper: Color = BLACK
    lower: Color = BLACK

    @staticmethod
    def black() -> 'Frame':
        return BLACK_FRAME

    @classmethod
    def uniform(cls, color: Color) -> 'Frame':
        """Both zones show the same color."""
        return cls(upper=color, lower=color)

    def to_hex_pair(self) -> Tuple[str, str]:
        return (self.upper.to_hex(), self.lower.to_hex())


BLACK_FRAME = Frame(BLACK, BLACK)

# Installed sequences are tuples so a reader holding one can never see it change.
FrameSequence = Tuple[Frame, ...]

DEFAULT_SEQUENCE: FrameSequence = (BLACK_FRAME,)
