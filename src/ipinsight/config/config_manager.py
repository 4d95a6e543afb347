"""
Configuration Manager for the IP resolution service
Loads settings from environment variables with an optional YAML overlay
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.exceptions import ConfigurationError

DEFAULT_PROVIDER_ORDER = ['ipwhois', 'ipgeolocation', 'ipapi', 'ipapi_com']


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


class ConfigManager:
    """
    Configuration manager

    Environment variables provide the defaults; a YAML file named by
    IPINSIGHT_CONFIG (or passed explicitly) is merged on top of them.
    """

    def __init__(self, config_file: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.config_file = config_file or os.getenv('IPINSIGHT_CONFIG')

        self._provider_config: Dict[str, Any] = {}
        self._telemetry_config: Dict[str, Any] = {}
        self._server_config: Dict[str, Any] = {}
        self._mock_config: Dict[str, Any] = {}
        self._logging_config: Dict[str, Any] = {}

        self._load_env_configs()
        if self.config_file:
            self._load_yaml_config(Path(self.config_file))

    def _load_env_configs(self):
        """Load configuration from environment variables"""
        order = os.getenv('IPINSIGHT_PROVIDERS')
        self._provider_config = {
            'order': [p.strip() for p in order.split(',') if p.strip()] if order else list(DEFAULT_PROVIDER_ORDER),
            'timeout_ms': _env_int('IPINSIGHT_PROVIDER_TIMEOUT_MS', 3000),
            'ipgeolocation_api_key': os.getenv('IPGEOLOCATION_API_KEY', ''),
            'user_agent': os.getenv('IPINSIGHT_USER_AGENT', 'ipinsight/1.0'),
        }

        self._telemetry_config = {
            'enabled': _env_bool('REMOTE_LOGGING_ENABLED', True),
            'url': os.getenv('LOG_SERVICE_URL', ''),
            'api_key': os.getenv('LOG_SERVICE_API_KEY', ''),
            'service_name': os.getenv('SERVICE_NAME', 'ip-info-backend'),
            'timeout_ms': _env_int('LOG_SERVICE_TIMEOUT_MS', 5000),
        }

        self._server_config = {
            'host': os.getenv('IPINSIGHT_HOST', '0.0.0.0'),
            'port': _env_int('IPINSIGHT_PORT', 3000),
        }

        self._mock_config = {
            'timezone': os.getenv('IPINSIGHT_MOCK_TIMEZONE', 'Asia/Shanghai'),
        }

        self._logging_config = {
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'file': os.getenv('LOG_FILE', ''),
        }

    def _load_yaml_config(self, path: Path):
        """Merge a YAML configuration file over the environment defaults"""
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping")

        sections = {
            'providers': self._provider_config,
            'telemetry': self._telemetry_config,
            'server': self._server_config,
            'mock': self._mock_config,
            'logging': self._logging_config,
        }
        for name, values in data.items():
            if name not in sections:
                self.logger.warning(f"Ignoring unknown configuration section: {name}")
                continue
            if not isinstance(values, dict):
                raise ConfigurationError(f"Section '{name}' in {path} must be a mapping")
            sections[name].update(values)

        self.logger.debug(f"Loaded configuration overlay from {path}")

    def get_provider_config(self) -> Dict[str, Any]:
        """Get provider cascade configuration"""
        return self._provider_config

    def get_provider_order(self) -> List[str]:
        return list(self._provider_config.get('order', DEFAULT_PROVIDER_ORDER))

    def get_provider_timeout_ms(self) -> int:
        return int(self._provider_config.get('timeout_ms', 3000))

    def get_telemetry_config(self) -> Dict[str, Any]:
        """Get remote telemetry configuration"""
        return self._telemetry_config

    def is_telemetry_enabled(self) -> bool:
        config = self._telemetry_config
        return bool(config.get('enabled')) and bool(config.get('url')) and bool(config.get('api_key'))

    def get_server_config(self) -> Dict[str, Any]:
        return self._server_config

    def get_mock_config(self) -> Dict[str, Any]:
        return self._mock_config

    def get_logging_config(self) -> Dict[str, Any]:
        return self._logging_config


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager

def reset_config_manager():
    """Reset the global configuration manager (useful for testing)"""
    global _config_manager
    _config_manager = None
