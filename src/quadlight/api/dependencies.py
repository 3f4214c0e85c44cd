"""
API Dependencies - Service container access for FastAPI endpoints

Pattern:
1. main.py builds the ServiceContainer during startup
2. main.py calls set_service_container()
3. Endpoints receive it via Depends(get_service_container)
"""

from typing import Optional

from fastapi import HTTPException, status

from quadlight.services.service_container import ServiceContainer

_service_container: Optional[ServiceContainer] = None


def set_service_container(services: Optional[ServiceContainer]) -> None:
    """Store the service container for API access (None clears it)."""
    global _service_container
    _service_container = services


async def get_service_container() -> ServiceContainer:
    """
    FastAPI dependency for accessing the service container.

    Raises:
        HTTPException: 503 Service Unavailable if services not initialized
    """
    if _service_container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service container not initialized. Controller may still be starting."
        )
    return _service_container
