"""
FrameCursor - thread-safe holder of the current frame sequence and read position.

Writer side (control surface):  regenerate(config) / install(sequence)
Reader side (streaming worker): next_frame()

Synthesis runs outside the lock. The lock only guards the O(1) swap of
(sequence, index) and the O(1) read-and-advance, so a long resynthesis never
stalls the reader and the writer never waits on hardware I/O.
"""

import threading
from typing import Optional

from quadlight.engine.frame_synthesis import synthesize
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LogCategory
from quadlight.models.frame import Frame, FrameSequence, BLACK_FRAME, DEFAULT_SEQUENCE
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


class FrameCursor:
    """
    Atomically swappable (sequence, index) pair.

    Invariant: 0 <= index < len(sequence) whenever a sequence is installed.

    Example:
        cursor = FrameCursor(LightingConfig(mode=LightingMode.CYCLE, colors=[red, blue]))
        frame = cursor.next_frame()          # reader thread
        cursor.regenerate(new_config)        # writer thread, any time
    """

    def __init__(self, config: Optional[LightingConfig] = None):
        self._lock = threading.Lock()
        self._frames: Optional[FrameSequence] = None
        self._index = 0

        if config is not None:
            self.regenerate(config)

    # ------------------------------------------------------------
    # Writer
    # ------------------------------------------------------------

    def regenerate(self, config: LightingConfig) -> int:
        """
        Synthesize the sequence for `config` and install it.

        Returns:
            Length of the installed sequence
        """
        frames = synthesize(config)
        self.install(frames)
        log.debug(
            "Sequence regenerated",
            mode=config.mode.value,
            colors=len(config.colors),
            frames=len(frames),
        )
        return len(frames)

    def install(self, frames: FrameSequence) -> None:
        """Replace the current sequence and rewind to its first frame."""
        frames = tuple(frames) or DEFAULT_SEQUENCE
        with self._lock:
            self._frames = frames
            self._index = 0

    # ------------------------------------------------------------
    # Reader
    # ------------------------------------------------------------

    def next_frame(self) -> Frame:
        """Return the frame at the cursor and advance, wrapping at the end."""
        with self._lock:
            frames = self._frames
            if not frames:
                return BLACK_FRAME
            frame = frames[self._index]
            self._index = (self._index + 1) % len(frames)
        return frame

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    def snapshot(self) -> FrameSequence:
        """The installed sequence (read-only tuple)."""
        with self._lock:
            return self._frames or DEFAULT_SEQUENCE

    @property
    def position(self) -> int:
        with self._lock:
            return self._index

    def __len__(self) -> int:
        with self._lock:
            return len(self._frames) if self._frames else 0
