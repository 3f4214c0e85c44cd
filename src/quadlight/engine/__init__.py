"""Frame engine - synthesis and streaming cursor"""

from .frame_synthesis import synthesize, speed_range, transition_length, GENERATORS
from .frame_cursor import FrameCursor

__all__ = [
    "synthesize",
    "speed_range",
    "transition_length",
    "GENERATORS",
    "FrameCursor",
]
