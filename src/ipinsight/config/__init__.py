"""Configuration module"""

from .config_manager import (
    ConfigManager, DEFAULT_PROVIDER_ORDER, get_config_manager, reset_config_manager
)

__all__ = [
    'ConfigManager', 'DEFAULT_PROVIDER_ORDER', 'get_config_manager', 'reset_config_manager'
]
