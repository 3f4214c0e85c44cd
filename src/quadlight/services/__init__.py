from .settings_store import SettingsStore, config_from_dict, config_to_dict
from .lighting_service import LightingService
from .streaming_worker import StreamingWorker
from .service_container import ServiceContainer

__all__ = [
    "SettingsStore",
    "config_from_dict",
    "config_to_dict",
    "LightingService",
    "StreamingWorker",
    "ServiceContainer",
]
