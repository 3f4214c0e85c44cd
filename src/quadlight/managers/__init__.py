"""
Managers for configuration
"""

from .config_manager import ConfigManager, AppConfig, DeviceConfig, StreamConfig, ApiConfig, StateConfig, LoggingConfig

__all__ = ['ConfigManager', 'AppConfig', 'DeviceConfig', 'StreamConfig', 'ApiConfig', 'StateConfig', 'LoggingConfig']
