"""
Lighting Endpoints - read and change the lighting configuration

Every change goes through LightingService.update(), so the frame sequence
the worker streams is regenerated and the settings are saved exactly as
they would be from the CLI.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from quadlight.api.dependencies import get_service_container
from quadlight.api.middleware.error_handler import InvalidColorError, InvalidLightingModeError
from quadlight.api.schemas.lighting import (
    FrameResponse, FramesResponse, LightingResponse, LightingUpdateRequest,
    ModeListResponse, ModeResponse
)
from quadlight.models.color import Color
from quadlight.models.enums import LightingMode, LogCategory
from quadlight.services.service_container import ServiceContainer
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)

router = APIRouter(
    prefix="/lighting",
    tags=["Lighting"],
)


def _current(services: ServiceContainer) -> LightingResponse:
    lighting = services.lighting_service
    return LightingResponse.from_config(lighting.config, lighting.frame_count)


@router.get(
    "",
    response_model=LightingResponse,
    summary="Get lighting configuration",
)
async def get_lighting(
    services: ServiceContainer = Depends(get_service_container)
) -> LightingResponse:
    return _current(services)


@router.put(
    "",
    response_model=LightingResponse,
    summary="Update lighting configuration",
    description="Partial update: omitted fields keep their current value"
)
async def update_lighting(
    request: LightingUpdateRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> LightingResponse:
    """
    Apply a partial change and regenerate the frame sequence.

    **Example Request:**
    ```json
    {"mode": "cycle", "colors": ["FF0000", "0000FF"], "speed": 80}
    ```
    """
    changes: Dict[str, Any] = {}

    if request.mode is not None:
        try:
            changes["mode"] = LightingMode.from_name(request.mode)
        except ValueError:
            raise InvalidLightingModeError(request.mode)

    if request.colors is not None:
        colors = []
        for value in request.colors:
            color = Color.parse_hex(value)
            if color is None:
                raise InvalidColorError(value)
            colors.append(color)
        changes["colors"] = tuple(colors)

    for key in ("speed", "delay", "brightness"):
        value = getattr(request, key)
        if value is not None:
            changes[key] = value

    if changes:
        log.debug("Lighting update requested", fields=", ".join(sorted(changes)))
        services.lighting_service.update(**changes)

    return _current(services)


@router.get(
    "/modes",
    response_model=ModeListResponse,
    summary="List lighting modes",
)
async def list_modes() -> ModeListResponse:
    return ModeListResponse(modes=[ModeResponse.from_mode(m) for m in LightingMode])


@router.get(
    "/frames",
    response_model=FramesResponse,
    summary="Preview synthesized frames",
    description="First `limit` frames of the installed sequence as hex pairs"
)
async def get_frames(
    limit: int = Query(32, ge=1, le=1000, description="Number of frames to return"),
    services: ServiceContainer = Depends(get_service_container)
) -> FramesResponse:
    lighting = services.lighting_service
    return FramesResponse(
        total=lighting.frame_count,
        frames=[FrameResponse.from_frame(f) for f in lighting.preview(limit)],
    )
