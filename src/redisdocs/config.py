import logging
import os
from pathlib import Path
from typing import Dict, Any, Tuple

from redisdocs.utils import load_settings

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    'store': 'redis',
    'redis_url': 'redis://localhost:6379/0',
    'scan_count': 100,
    'log_level': 'info',
}

# environment variable -> config key
ENV_OVERRIDES = {
    'REDISDOCS_STORE': 'store',
    'REDISDOCS_REDIS_URL': 'redis_url',
    'REDISDOCS_LOG_LEVEL': 'log_level',
}


class Config:
    """Static configuration class - no instances, only class methods"""
    _config: Dict[str, Any] = dict(DEFAULTS)

    @classmethod
    def initialize(cls, config_file: str = '') -> Dict[str, Any]:
        """Initialize the config with values from config file and environment"""
        config = dict(DEFAULTS)
        config.update(cls._load_system_config(config_file))
        for env_name, key in ENV_OVERRIDES.items():
            if os.environ.get(env_name):
                config[key] = os.environ[env_name]
        cls._config = config
        return cls._config

    @classmethod
    def reset(cls) -> None:
        """Restore the default configuration"""
        cls._config = dict(DEFAULTS)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a configuration value by key"""
        return cls._config.get(key, default)

    @classmethod
    def get_store_params(cls) -> Tuple[str, str]:
        """Get store type and connection url from config data"""
        return (
            cls._config.get('store', DEFAULTS['store']),
            cls._config.get('redis_url', DEFAULTS['redis_url'])
        )

    @classmethod
    def scan_count(cls) -> int:
        """Batch size hint passed to SCAN when enumerating collection keys"""
        try:
            return max(1, int(cls._config.get('scan_count', DEFAULTS['scan_count'])))
        except (TypeError, ValueError):
            return DEFAULTS['scan_count']

    @classmethod
    def configure_logging(cls) -> None:
        """Apply the configured log level to the root logger"""
        level_name = str(cls._config.get('log_level', 'info')).upper()
        level = getattr(logging, level_name, logging.INFO)
        logging.basicConfig(
            level=level,
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )
        logging.getLogger().setLevel(level)

    @classmethod
    def _load_system_config(cls, config_file: str) -> Dict[str, Any]:
        """
        Load and return the configuration from a JSON settings file.
        If the file is not found, return an empty mapping so defaults apply.
        """
        if len(config_file) > 0:
            config_path = Path(config_file)
            if config_path.exists():
                return load_settings(config_path)
            logger.warning(f'Configuration file "{config_file}" not found. Using defaults.')
        return {}
