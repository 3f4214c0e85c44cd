"""
FastAPI Application Factory

create_app() assembles the HTTP control surface around whatever services
were registered with set_service_container(): CORS, exception handlers,
the lighting and device routers under /api/v1, a health check and a root
index. Nothing here touches hardware, so tests can build an app freely.
"""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quadlight import __version__
from quadlight.api.middleware.error_handler import register_exception_handlers
from quadlight.api.routes import device, lighting
from quadlight.models.enums import LogCategory
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

API_PREFIX = "/api/v1"

# Local web UI dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def _add_system_routes(app: FastAPI, title: str, version: str) -> None:

    @app.get("/api/health", tags=["System"], summary="Health check")
    async def health_check():
        return {"status": "healthy", "service": "quadlight-api", "version": version}

    @app.get("/", include_in_schema=False)
    async def root():
        return {"message": title, "docs": app.docs_url, "health": "/api/health"}


def create_app(
    title: str = "QuadLight Controller",
    description: str = "REST API for two-zone RGB lighting control",
    version: str = __version__,
    docs_enabled: bool = True,
    cors_origins: Optional[List[str]] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title (shown in docs)
        description: API description
        version: API version
        docs_enabled: Serve /docs, /redoc and /openapi.json
        cors_origins: Allowed CORS origins (default: local dev servers)
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    origins = DEFAULT_CORS_ORIGINS if cors_origins is None else cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in (lighting.router, device.router):
        app.include_router(router, prefix=API_PREFIX)
    _add_system_routes(app, title, version)

    log.info(f"FastAPI app created: {title} v{version}", origins=len(origins))
    return app
