"""
Models package - Data models for the two-zone lighting controller
"""

from .enums import LightingMode, ConnectionState, LogLevel, LogCategory
from .color import Color, gradient, next_gradient_step
from .frame import Frame, FrameSequence, BLACK_FRAME

__all__ = [
    'LightingMode',
    'ConnectionState',
    'LogLevel',
    'LogCategory',
    'Color',
    'gradient',
    'next_gradient_step',
    'Frame',
    'FrameSequence',
    'BLACK_FRAME',
]
