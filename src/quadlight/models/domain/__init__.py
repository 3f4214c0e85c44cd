"""Domain models - configuration objects"""

from quadlight.models.domain.lighting import LightingConfig

__all__ = [
    "LightingConfig",
]
