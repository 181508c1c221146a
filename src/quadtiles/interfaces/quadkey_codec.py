from abc import ABC, abstractmethod
from typing import Dict, Any, List, Tuple

from quadtiles.models.tile import Tile


class IQuadKeyCodec(ABC):
    """Interface for quadkey codec implementations"""

    @abstractmethod
    def encode(self, x: int, y: int, z: int) -> str:
        """Encode tile coordinates as a quadkey"""
        pass

    @abstractmethod
    def decode(self, quadkey: str) -> Tile:
        """Decode a quadkey into tile coordinates"""
        pass

    @abstractmethod
    def encode_batch(self, tiles: List[Tuple[int, int, int]]) -> Dict[str, Any]:
        """Encode multiple tiles"""
        pass

    @abstractmethod
    def decode_batch(self, quadkeys: List[str]) -> Dict[str, Any]:
        """Decode multiple quadkeys"""
        pass


class IConfigLoader(ABC):
    """Interface for configuration loading"""

    @abstractmethod
    def load_config(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from file"""
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration"""
        pass
