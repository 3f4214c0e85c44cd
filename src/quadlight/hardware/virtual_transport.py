from __future__ import annotations

import threading
import time
from typing import List, Optional

from quadlight.models.color import Color
from quadlight.models.frame import Frame


class VirtualHandle:
    def __init__(self, serial: int):
        self.serial = serial
        self.open = True


class VirtualTransport:
    """
    In-memory device for development machines and tests.

    Records every written frame. `fail_opens` makes the next N open() calls
    return None; `fail_after` makes a single write fail once that many frames
    have been written on the current handle. `write_delay` simulates device
    latency.
    """

    def __init__(
        self,
        fail_opens: int = 0,
        fail_after: Optional[int] = None,
        write_delay: float = 0.0,
        max_frames: int = 10_000,
    ):
        self.fail_opens = fail_opens
        self.fail_after = fail_after
        self.write_delay = write_delay
        self.max_frames = max_frames

        self.frames: List[Frame] = []
        self.open_calls = 0
        self.close_calls = 0
        self._handle_writes = 0
        self._lock = threading.Lock()

    def open(self) -> Optional[VirtualHandle]:
        with self._lock:
            self.open_calls += 1
            if self.fail_opens > 0:
                self.fail_opens -= 1
                return None
            self._handle_writes = 0
            return VirtualHandle(self.open_calls)

    def write(self, handle: VirtualHandle, upper: Color, lower: Color) -> bool:
        if handle is None or not handle.open:
            return False
        if self.write_delay:
            time.sleep(self.write_delay)
        with self._lock:
            if self.fail_after is not None and self._handle_writes >= self.fail_after:
                self.fail_after = None
                return False
            self._handle_writes += 1
            self.frames.append(Frame(upper, lower))
            if len(self.frames) > self.max_frames:
                del self.frames[: len(self.frames) - self.max_frames]
        return True

    def close(self, handle: Optional[VirtualHandle]) -> None:
        if handle is None:
            return
        with self._lock:
            handle.open = False
            self.close_calls += 1

    def set_color(self, handle: VirtualHandle, color: Color) -> bool:
        return self.write(handle, color, color)

    def probe(self, handle: VirtualHandle) -> bool:
        return handle is not None and handle.open

    def written(self) -> List[Frame]:
        with self._lock:
            return list(self.frames)
