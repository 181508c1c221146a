"""Logging configuration"""
import logging
import sys
from typing import Dict, Any

from quadtiles.exceptions.quadkey_exceptions import ConfigurationError

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggingManager:
    """Manages quadtiles logging configuration"""

    @staticmethod
    def resolve_level(level_name: Any) -> int:
        """Map a configured level name to a logging level"""
        if not isinstance(level_name, str) or level_name.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown logging level {level_name!r}, expected one of: {', '.join(LOG_LEVELS)}")
        return getattr(logging, level_name.upper())

    @staticmethod
    def setup_logging(config: Dict[str, Any]) -> None:
        """Setup logging from the 'logging' section of the configuration"""
        logging_config = config.get('logging', {})
        level = LoggingManager.resolve_level(logging_config.get('level', 'WARNING'))

        logging.basicConfig(
            level=level,
            format=logging_config.get('format', DEFAULT_FORMAT),
            stream=sys.stdout
        )
        logging.getLogger('quadtiles').setLevel(level)
        logging.getLogger('shapely').setLevel(logging.WARNING)
