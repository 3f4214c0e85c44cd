# hardware/transport_interface.py
"""
ITransport Protocol
===================
Hardware abstraction for the two-zone lighting device.
Minimal contract for any driver (QC2S over hidapi, virtual, ...).
"""

from __future__ import annotations
from typing import Any, Optional, Protocol

from quadlight.models.color import Color


class ITransport(Protocol):
    """
    Protocol defining the device transport used by the streaming worker.

    All implementations must provide:
    - open: acquire a device handle, or None when no device is available
    - write: push one (upper, lower) frame, False on any I/O failure
    - close: release a handle (safe to call on a failed handle)

    Implementations never raise from these methods; a failed write is a
    recoverable disconnect handled by the caller.
    """

    def open(self) -> Optional[Any]:
        """Open the device. Returns an opaque handle or None."""
        ...

    def write(self, handle: Any, upper: Color, lower: Color) -> bool:
        """Send one frame. Returns True on success."""
        ...

    def close(self, handle: Any) -> None:
        """Release the handle."""
        ...
