import json
import os
from typing import Dict, Any

from quadtiles.interfaces.quadkey_codec import IConfigLoader
from quadtiles.infrastructure.logging import LOG_LEVELS
from quadtiles.models.tile import CodecSettings, MAX_ZOOM, OUT_OF_RANGE_POLICIES
from quadtiles.exceptions.quadkey_exceptions import ConfigurationError, ValidationError

DEFAULT_CONFIG: Dict[str, Any] = {
    'max_zoom': MAX_ZOOM,
    'out_of_range': 'reject',
    'logging': {
        'level': 'WARNING',
    },
}


class ConfigService(IConfigLoader):
    """Service for loading and validating configuration"""

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from JSON file"""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Config file {config_path} not found!")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading config: {e}")

        if not isinstance(config, dict):
            raise ValidationError("Configuration must be a JSON object")

        config = self._process_config(config)
        self.validate_config(config)
        return config

    def default_config(self) -> Dict[str, Any]:
        """Configuration used when no file is given"""
        return self._process_config({})

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration structure"""
        max_zoom = config['max_zoom']
        if not isinstance(max_zoom, int) or isinstance(max_zoom, bool):
            raise ValidationError("max_zoom must be an integer")
        if not 0 <= max_zoom <= MAX_ZOOM:
            raise ValidationError(f"max_zoom must be between 0 and {MAX_ZOOM}")

        if config['out_of_range'] not in OUT_OF_RANGE_POLICIES:
            raise ValidationError(
                f"out_of_range must be one of: {', '.join(OUT_OF_RANGE_POLICIES)}")

        if not isinstance(config['logging'], dict):
            raise ValidationError("logging must be a dictionary")

        level = config['logging'].get('level', 'WARNING')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ValidationError(
                f"logging.level must be one of: {', '.join(LOG_LEVELS)}")

        fmt = config['logging'].get('format')
        if fmt is not None and not isinstance(fmt, str):
            raise ValidationError("logging.format must be a string")

        return True

    def _process_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Fill in defaults for missing keys"""
        processed = dict(DEFAULT_CONFIG)
        processed['logging'] = dict(DEFAULT_CONFIG['logging'])
        processed.update(config)
        return processed

    def get_settings(self, config: Dict[str, Any]) -> CodecSettings:
        """Get codec settings from configuration"""
        return CodecSettings(
            max_zoom=config.get('max_zoom', MAX_ZOOM),
            out_of_range=config.get('out_of_range', 'reject')
        )
