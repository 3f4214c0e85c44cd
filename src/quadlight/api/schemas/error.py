"""
Error schemas - Pydantic models for error responses

Every error the API returns, domain or validation or unexpected, uses one
of these shapes so clients can handle them uniformly.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""
    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional context (field names, valid values, etc.)"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the error occurred"
    )


class ErrorResponse(BaseModel):
    """API error response - standardized format"""
    error: ErrorDetail = Field(description="Error information")
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "error": {
                "code": "INVALID_LIGHTING_MODE",
                "message": "Lighting mode 'strobe' is not supported",
                "details": {
                    "mode": "strobe",
                    "valid_modes": ["solid", "blink", "cycle", "wave", "lightning", "pulse"]
                },
                "timestamp": "2026-01-12T10:30:00Z"
            },
            "request_id": "5f0c1e3a-8d2b-4c1e-9a53-1f2e3d4c5b6a"
        }
    })


class ValidationErrorResponse(BaseModel):
    """Validation error - when request body is invalid"""
    error: ErrorDetail = Field(description="Error information")
    validation_errors: List[Dict[str, Any]] = Field(
        description="Per-field validation errors"
    )
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")
