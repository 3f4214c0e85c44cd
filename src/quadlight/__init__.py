"""quadlight - two-zone RGB lighting controller for QuadCast 2S class devices"""

__version__ = "0.1.0"
