"""
QC2S protocol - packet layout for the QuadCast 2S RGB controller
=================================================================

Every report is 64 bytes. A frame is sent as:

    init      [0x10, 0x01, 0, ...]            once per handle, acked
    start     [0x44, 0x01, 6, 0, ...]          acked
    group n   [0x44, 0x02, n, 0, r, g, b, ...] x6, acked, n = 0..5

Groups 0-1 light the upper zone, groups 2-5 the lower zone. Group packets
repeat the RGB triplet from byte 4 to the end of the report.
"""

from typing import List

from quadlight.models.color import Color

PACKET_SIZE = 64
GROUP_COUNT = 6
UPPER_GROUPS = 2
RGB_OFFSET = 4

CMD_INIT = 0x10
CMD_COLOR = 0x44
SUB_START = 0x01
SUB_DATA = 0x02

ACK_TIMEOUT_MS = 100
INTER_GROUP_MS = 45

# USB identity
VENDOR_ID = 0x03F0
PRODUCT_ID = 0x02B5
INTERFACE = 1
USAGE_PAGE_PRIMARY = 0xFF13
USAGE_PRIMARY = 0xFF00
USAGE_PAGE_GENERIC_DESKTOP = 0x0001
USAGE_POINTER = 0x0001
USAGE_MOUSE = 0x0002
VENDOR_USAGE_PAGE_MIN = 0xFF00


def build_init_packet() -> bytes:
    packet = bytearray(PACKET_SIZE)
    packet[0] = CMD_INIT
    packet[1] = SUB_START
    return bytes(packet)


def build_start_packet() -> bytes:
    packet = bytearray(PACKET_SIZE)
    packet[0] = CMD_COLOR
    packet[1] = SUB_START
    packet[2] = GROUP_COUNT
    return bytes(packet)


def build_group_packet(group: int, color: Color) -> bytes:
    packet = bytearray(PACKET_SIZE)
    packet[0] = CMD_COLOR
    packet[1] = SUB_DATA
    packet[2] = group
    for i in range(RGB_OFFSET, PACKET_SIZE - 2, 3):
        packet[i] = color.r
        packet[i + 1] = color.g
        packet[i + 2] = color.b
    return bytes(packet)


def build_frame_packets(upper: Color, lower: Color) -> List[bytes]:
    """Group packets for one frame, in send order (start packet excluded)."""
    return [
        build_group_packet(group, upper if group < UPPER_GROUPS else lower)
        for group in range(GROUP_COUNT)
    ]
