"""
QuadLight - API Layer

REST control surface over LightingService and the streaming worker.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic request/response models
- middleware/ : Error handling
"""

from quadlight.api.main import create_app

__all__ = ["create_app"]
