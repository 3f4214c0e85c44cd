"""
Device Endpoints - streaming worker status and reconnect
"""

from fastapi import APIRouter, Depends

from quadlight.api.dependencies import get_service_container
from quadlight.api.middleware.error_handler import DeviceBusyError
from quadlight.api.schemas.lighting import DeviceStatusResponse
from quadlight.models.enums import LogCategory
from quadlight.services.service_container import ServiceContainer
from quadlight.services.streaming_worker import StreamingWorker, WorkerStillRunningError
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)

router = APIRouter(
    prefix="/device",
    tags=["Device"],
)


def _status(worker: StreamingWorker) -> DeviceStatusResponse:
    return DeviceStatusResponse(
        state=worker.state.name,
        connected=worker.connected,
        running=worker.running,
        frames_written=worker.frames_written,
        failed_connects=worker.failed_connects,
    )


@router.get(
    "",
    response_model=DeviceStatusResponse,
    summary="Device connection status",
)
async def get_device_status(
    services: ServiceContainer = Depends(get_service_container)
) -> DeviceStatusResponse:
    return _status(services.streaming_worker)


@router.post(
    "/reconnect",
    response_model=DeviceStatusResponse,
    summary="Restart the streaming worker",
    description="Closes the current handle (if any) and starts a fresh connect cycle"
)
def reconnect_device(
    services: ServiceContainer = Depends(get_service_container)
) -> DeviceStatusResponse:
    # Plain def: stop() joins the worker thread, keep it off the event loop
    log.info("Reconnect requested")
    try:
        services.streaming_worker.reconnect()
    except WorkerStillRunningError as ex:
        raise DeviceBusyError(str(ex))
    return _status(services.streaming_worker)
