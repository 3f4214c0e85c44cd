"""
Error handling for the API

Every failure leaves the API as an ErrorResponse-shaped JSON body tagged
with a fresh request id:

    RequestValidationError  -> 422 VALIDATION_ERROR (plus per-field errors)
    DomainError subclasses  -> their own code and status
    anything else           -> 500 INTERNAL_SERVER_ERROR
"""

import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quadlight.api.schemas.error import ErrorDetail, ErrorResponse, ValidationErrorResponse
from quadlight.models.enums import LightingMode, LogCategory
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Base class for errors the API reports with a specific code"""
    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[dict] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code


class InvalidLightingModeError(DomainError):
    """Mode name doesn't match any LightingMode"""
    status_code = 422

    def __init__(self, mode: str):
        super().__init__(
            "INVALID_LIGHTING_MODE",
            f"Lighting mode '{mode}' is not supported",
            {"mode": mode, "valid_modes": [m.value for m in LightingMode]},
        )


class InvalidColorError(DomainError):
    """Color string isn't six hex digits"""
    status_code = 422

    def __init__(self, value: str):
        super().__init__(
            "INVALID_COLOR",
            f"Color '{value}' is not a 6-digit hex value",
            {"value": value},
        )


class DeviceBusyError(DomainError):
    """Streaming worker can't restart while its previous thread is alive"""
    status_code = 409

    def __init__(self, reason: str):
        super().__init__("DEVICE_BUSY", reason)


def _new_request_id() -> str:
    return str(uuid.uuid4())


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    # loc starts with "body" / "query"
    return [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def _json(status_code: int, body) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = _new_request_id()
        errors = _field_errors(exc)
        log.warn("Request validation failed", request_id=request_id, path=request.url.path,
                 errors=len(errors))

        return _json(status.HTTP_422_UNPROCESSABLE_ENTITY, ValidationErrorResponse(
            error=ErrorDetail(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"error_count": len(errors)},
            ),
            validation_errors=errors,
            request_id=request_id,
        ))

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        request_id = _new_request_id()
        log.warn(f"Domain error: {exc.code}", request_id=request_id, reason=exc.message)

        return _json(exc.status_code, ErrorResponse(
            error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details),
            request_id=request_id,
        ))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_id = _new_request_id()
        log.error(f"Unexpected error: {type(exc).__name__}", request_id=request_id,
                  path=request.url.path, error=str(exc))

        return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(
            error=ErrorDetail(
                code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred. Please try again.",
                details={"request_id": request_id},
            ),
            request_id=request_id,
        ))
