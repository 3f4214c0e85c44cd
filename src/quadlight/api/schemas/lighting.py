"""
Lighting schemas - Pydantic models for the lighting and device endpoints
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode
from quadlight.models.frame import Frame


class LightingResponse(BaseModel):
    """Current lighting configuration"""
    mode: str = Field(description="Active lighting mode")
    colors: List[str] = Field(description="Ordered palette as RRGGBB hex strings")
    speed: int = Field(ge=0, le=100, description="Animation speed 0-100")
    delay: int = Field(ge=0, le=100, description="Blink gap in frames 0-100")
    brightness: int = Field(ge=0, le=100, description="Brightness 0-100%")
    primary_color: str = Field(description="First palette color, or 000000 when empty")
    frame_count: int = Field(description="Length of the installed frame sequence")

    @classmethod
    def from_config(cls, config: LightingConfig, frame_count: int) -> "LightingResponse":
        return cls(
            mode=config.mode.value,
            colors=config.color_hexes(),
            speed=config.speed,
            delay=config.delay,
            brightness=config.brightness,
            primary_color=config.primary_color.to_hex(),
            frame_count=frame_count,
        )


class LightingUpdateRequest(BaseModel):
    """
    Partial lighting update. Omitted fields keep their current value.

    Colors are validated as hex here; the mode name is checked by the
    endpoint so an unknown mode yields INVALID_LIGHTING_MODE, not a
    generic validation error.
    """
    mode: Optional[str] = Field(None, description="solid, blink, cycle, wave, lightning or pulse")
    colors: Optional[List[str]] = Field(
        None,
        max_length=10,
        description="Palette as RRGGBB hex strings (a leading # is accepted)"
    )
    speed: Optional[int] = Field(None, ge=0, le=100, description="Animation speed 0-100")
    delay: Optional[int] = Field(None, ge=0, le=100, description="Blink gap 0-100")
    brightness: Optional[int] = Field(None, ge=0, le=100, description="Brightness 0-100%")


class ModeResponse(BaseModel):
    """One lighting mode and the parameters it honors"""
    id: str = Field(description="Mode identifier")
    label: str
    description: str
    uses_speed: bool
    uses_delay: bool
    max_colors: int

    @classmethod
    def from_mode(cls, mode: LightingMode) -> "ModeResponse":
        return cls(
            id=mode.value,
            label=mode.label,
            description=mode.description,
            uses_speed=mode.uses_speed,
            uses_delay=mode.uses_delay,
            max_colors=mode.max_colors,
        )


class ModeListResponse(BaseModel):
    modes: List[ModeResponse]


class FrameResponse(BaseModel):
    upper: str = Field(description="Upper zone color RRGGBB")
    lower: str = Field(description="Lower zone color RRGGBB")

    @classmethod
    def from_frame(cls, frame: Frame) -> "FrameResponse":
        upper, lower = frame.to_hex_pair()
        return cls(upper=upper, lower=lower)


class FramesResponse(BaseModel):
    """Leading frames of the installed sequence"""
    total: int = Field(description="Full sequence length (one period)")
    frames: List[FrameResponse]


class DeviceStatusResponse(BaseModel):
    """Streaming worker and device connection status"""
    state: str = Field(description="DISCONNECTED, CONNECTING or CONNECTED")
    connected: bool
    running: bool = Field(description="Whether the streaming thread is alive")
    frames_written: int
    failed_connects: int = Field(description="Consecutive failed open attempts")
