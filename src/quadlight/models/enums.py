"""
Enums for the lighting controller
"""

from enum import Enum, auto

# Largest palette any mode consumes
MAX_COLORS = 10


class LightingMode(Enum):
    """
    Lighting modes supported by the two-zone device.

    Values are the persisted names ("solid", "blink", ...).
    """
    SOLID = "solid"
    BLINK = "blink"
    CYCLE = "cycle"
    WAVE = "wave"
    LIGHTNING = "lightning"
    PULSE = "pulse"

    @property
    def uses_speed(self) -> bool:
        return self is not LightingMode.SOLID

    @property
    def uses_delay(self) -> bool:
        return self is LightingMode.BLINK

    @property
    def max_colors(self) -> int:
        return 1 if self is LightingMode.SOLID else MAX_COLORS

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _MODE_DESCRIPTIONS[self]

    @classmethod
    def from_name(cls, name: str) -> 'LightingMode':
        """Parse a mode name case-insensitively ("Cycle", "CYCLE", "cycle")."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Invalid LightingMode: {name}")


_MODE_DESCRIPTIONS = {
    LightingMode.SOLID: "Steady single color",
    LightingMode.BLINK: "Flash between colors",
    LightingMode.CYCLE: "Smooth color transitions",
    LightingMode.WAVE: "Offset upper and lower zones",
    LightingMode.LIGHTNING: "Random flash effects",
    LightingMode.PULSE: "Synchronized breathing",
}


class ConnectionState(Enum):
    """Streaming worker connection states"""
    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # HID device enumeration, packets
    STATE = auto()       # Persisted settings
    COLOR = auto()       # Color parsing
    ANIMATION = auto()   # Frame synthesis, cursor swaps
    SYSTEM = auto()      # Startup, shutdown
    TRANSPORT = auto()   # Streaming worker, connection state
    API = auto()

    GENERAL = auto()
