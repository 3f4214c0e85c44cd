"""Service Container - groups the long-lived services handed to the API and CLI"""

from dataclasses import dataclass

from quadlight.engine.frame_cursor import FrameCursor
from quadlight.managers.config_manager import ConfigManager
from quadlight.services.lighting_service import LightingService
from quadlight.services.streaming_worker import StreamingWorker


@dataclass
class ServiceContainer:
    """
    Everything an endpoint needs, built once at startup.

    Usage:
        services = ServiceContainer(
            lighting_service=lighting_service,
            streaming_worker=worker,
            cursor=cursor,
            config_manager=config_manager,
        )
        set_service_container(services)

        @router.get("/lighting")
        async def get_lighting(services: ServiceContainer = Depends(get_service_container)):
            return services.lighting_service.config
    """

    lighting_service: LightingService
    streaming_worker: StreamingWorker
    cursor: FrameCursor
    config_manager: ConfigManager
