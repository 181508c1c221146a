import logging
from typing import Dict, Any, List, Optional, Tuple

from quadtiles.interfaces.quadkey_codec import IQuadKeyCodec
from quadtiles.models.tile import Tile, CodecSettings
from quadtiles.utils.quadkey_calculator import QuadKeyCalculator
from quadtiles.exceptions.quadkey_exceptions import QuadKeyException, MalformedQuadKeyError

logger = logging.getLogger(__name__)


class QuadKeyService(IQuadKeyCodec):
    """Service for converting between tile coordinates and quadkeys"""

    def __init__(self, settings: Optional[CodecSettings] = None):
        self.settings = settings or CodecSettings()

    def encode(self, x: int, y: int, z: int) -> str:
        """Encode a single tile"""
        return QuadKeyCalculator.tile2key(
            x, y, z,
            strict=self.settings.is_strict(),
            max_zoom=self.settings.max_zoom
        )

    def decode(self, quadkey: str) -> Tile:
        """Decode a single quadkey"""
        return QuadKeyCalculator.key2tile(quadkey, max_zoom=self.settings.max_zoom)

    def parent(self, quadkey: str) -> str:
        """Quadkey of the containing tile"""
        self.decode(quadkey)
        return QuadKeyCalculator.parent_key(quadkey)

    def children(self, quadkey: str) -> List[str]:
        """Quadkeys of the four contained tiles"""
        self.decode(quadkey)
        if len(quadkey) >= self.settings.max_zoom:
            raise MalformedQuadKeyError(
                f"Quadkey {quadkey!r} is already at max zoom {self.settings.max_zoom}")
        return QuadKeyCalculator.child_keys(quadkey)

    def encode_batch(self, tiles: List[Tuple[int, int, int]]) -> Dict[str, Any]:
        """Encode multiple tiles, recording failures per item"""
        results: List[Optional[str]] = []
        errors: List[Dict[str, Any]] = []

        for index, (x, y, z) in enumerate(tiles):
            try:
                results.append(self.encode(x, y, z))
            except QuadKeyException as e:
                logger.warning("Failed to encode tile (%s, %s, %s): %s", x, y, z, e)
                results.append(None)
                errors.append({'index': index, 'input': (x, y, z), 'error': str(e)})

        return {
            'converted': len(tiles) - len(errors),
            'failed': len(errors),
            'results': results,
            'errors': errors
        }

    def decode_batch(self, quadkeys: List[str]) -> Dict[str, Any]:
        """Decode multiple quadkeys, recording failures per item"""
        results: List[Optional[Tile]] = []
        errors: List[Dict[str, Any]] = []

        for index, quadkey in enumerate(quadkeys):
            try:
                results.append(self.decode(quadkey))
            except QuadKeyException as e:
                logger.warning("Failed to decode quadkey %r: %s", quadkey, e)
                results.append(None)
                errors.append({'index': index, 'input': quadkey, 'error': str(e)})

        return {
            'converted': len(quadkeys) - len(errors),
            'failed': len(errors),
            'results': results,
            'errors': errors
        }
