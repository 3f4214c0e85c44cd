# hardware/hid_transport.py
"""
Qc2sHidTransport - hidapi driver for the QuadCast 2S RGB controller
===================================================================
Concrete implementation of ITransport.

Features:
- Device lookup in passes of decreasing specificity (the controller exposes
  several HID interfaces; the vendor one is preferred, pointer/mouse usages
  are never opened)
- Lazy init report before the first frame of each handle
- Every report is acknowledged; any write/read error fails the frame
- Per-handle I/O lock so set_color()/probe() can be called from another thread
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import hid

from quadlight.hardware import qc2s_protocol as proto
from quadlight.models.color import Color
from quadlight.models.enums import LogCategory
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)

DeviceInfo = Dict[str, Any]


@dataclass(frozen=True)
class Qc2sConfig:
    """USB identity and pacing for the QC2S controller."""
    vendor_id: int = proto.VENDOR_ID
    product_id: int = proto.PRODUCT_ID
    interface: int = proto.INTERFACE
    inter_group_ms: int = proto.INTER_GROUP_MS
    ack_timeout_ms: int = proto.ACK_TIMEOUT_MS


@dataclass
class Qc2sHandle:
    """Open device plus per-handle protocol state."""
    device: Any
    path: bytes
    init_sent: bool = False
    io_lock: threading.Lock = field(default_factory=threading.Lock)


def _is_pointer_usage(info: DeviceInfo) -> bool:
    return (
        info.get("usage_page") == proto.USAGE_PAGE_GENERIC_DESKTOP
        and info.get("usage") in (proto.USAGE_POINTER, proto.USAGE_MOUSE)
    )


def _is_vendor_usage(info: DeviceInfo) -> bool:
    return (info.get("usage_page") or 0) >= proto.VENDOR_USAGE_PAGE_MIN


def build_match_passes(interface: int) -> List[Callable[[DeviceInfo], bool]]:
    """Device predicates, most specific first."""
    def on_interface(info: DeviceInfo) -> bool:
        return info.get("interface_number") == interface

    return [
        lambda d: on_interface(d)
        and d.get("usage_page") == proto.USAGE_PAGE_PRIMARY
        and d.get("usage") == proto.USAGE_PRIMARY,
        lambda d: on_interface(d) and d.get("usage_page") == proto.USAGE_PAGE_PRIMARY,
        lambda d: on_interface(d) and _is_vendor_usage(d),
        _is_vendor_usage,
        lambda d: on_interface(d) and not _is_pointer_usage(d),
        lambda d: not _is_pointer_usage(d),
    ]


def candidate_paths(devices: List[DeviceInfo], interface: int = proto.INTERFACE) -> List[bytes]:
    """Distinct device paths in the order they should be tried."""
    ordered: List[bytes] = []
    for matches in build_match_passes(interface):
        for info in devices:
            path = info.get("path")
            if path and path not in ordered and matches(info):
                ordered.append(path)
    return ordered


class Qc2sHidTransport:
    """
    QC2S driver using the hidapi bindings.

    open() returns a Qc2sHandle; write() sends one two-zone frame.
    """

    def __init__(self, config: Optional[Qc2sConfig] = None) -> None:
        self.config = config or Qc2sConfig()

    # ==================== ITransport API ====================

    def open(self) -> Optional[Qc2sHandle]:
        try:
            devices = hid.enumerate(self.config.vendor_id, self.config.product_id)
        except (OSError, ValueError) as ex:
            log.warn("HID enumeration failed", error=str(ex))
            return None

        if not devices:
            log.debug("No QC2S device found")
            return None

        for path in candidate_paths(devices, self.config.interface):
            device = hid.device()
            try:
                device.open_path(path)
            except (OSError, ValueError) as ex:
                log.debug("Failed to open HID path", path=path, error=str(ex))
                continue
            log.info("Opened QC2S device", path=path)
            return Qc2sHandle(device=device, path=path)

        log.debug("No openable QC2S interface", candidates=len(devices))
        return None

    def write(self, handle: Qc2sHandle, upper: Color, lower: Color) -> bool:
        if handle is None or handle.device is None:
            return False

        with handle.io_lock:
            if not handle.init_sent:
                if not self._send_report(handle, proto.build_init_packet()):
                    return False
                handle.init_sent = True

            if not self._send_report(handle, proto.build_start_packet()):
                return False

            for packet in proto.build_frame_packets(upper, lower):
                if not self._send_report(handle, packet):
                    return False
                if self.config.inter_group_ms > 0:
                    time.sleep(self.config.inter_group_ms / 1000)

        return True

    def close(self, handle: Optional[Qc2sHandle]) -> None:
        if handle is None:
            return
        with handle.io_lock:
            device, handle.device = handle.device, None
        if device is not None:
            try:
                device.close()
            except (OSError, ValueError) as ex:
                log.debug("Error while closing HID device", error=str(ex))
            log.info("Closed QC2S device", path=handle.path)

    # ==================== Extras ====================

    def set_color(self, handle: Qc2sHandle, color: Color) -> bool:
        """Same color on both zones."""
        return self.write(handle, color, color)

    def probe(self, handle: Qc2sHandle) -> bool:
        """Send an init report; True if the device acknowledged it."""
        if handle is None or handle.device is None:
            return False
        with handle.io_lock:
            ok = self._send_report(handle, proto.build_init_packet())
            if ok:
                handle.init_sent = True
        return ok

    # ==================== Internals ====================

    def _send_report(self, handle: Qc2sHandle, packet: bytes, expect_ack: bool = True) -> bool:
        """Write one report and read its ack. Caller holds handle.io_lock."""
        try:
            written = handle.device.write(packet)
            if written is not None and written < 0:
                log.debug("hid write failed")
                return False
            if expect_ack:
                handle.device.read(proto.PACKET_SIZE, self.config.ack_timeout_ms)
        except (OSError, ValueError) as ex:
            log.debug("HID I/O error", error=str(ex))
            return False
        return True
