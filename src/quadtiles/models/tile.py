from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from quadtiles.exceptions.quadkey_exceptions import InvalidCoordinateError, ValidationError

MAX_ZOOM = 32
OUT_OF_RANGE_POLICIES = ('reject', 'truncate')


@dataclass(frozen=True)
class Tile:
    """Data model for a tile coordinate at a zoom level"""
    x: int
    y: int
    z: int

    def get_quadkey(self) -> str:
        """Get quadkey string for this tile"""
        from quadtiles.utils.quadkey_calculator import QuadKeyCalculator
        return QuadKeyCalculator.tile2key(self.x, self.y, self.z)

    def get_parent(self) -> 'Tile':
        """Get the containing tile one zoom level up"""
        if self.z == 0:
            raise InvalidCoordinateError("Root tile has no parent")
        return Tile(self.x // 2, self.y // 2, self.z - 1)

    def get_children(self) -> List['Tile']:
        """Get the four tiles one zoom level down, in quadkey digit order"""
        if self.z >= MAX_ZOOM:
            raise InvalidCoordinateError(
                f"Tile at zoom {self.z} has no children below max zoom {MAX_ZOOM}")
        x, y, z = 2 * self.x, 2 * self.y, self.z + 1
        return [Tile(x, y, z), Tile(x + 1, y, z), Tile(x, y + 1, z), Tile(x + 1, y + 1, z)]

    def contains(self, other: 'Tile') -> bool:
        """Check if other lies inside this tile (a tile contains itself)"""
        if other.z < self.z:
            return False
        shift = other.z - self.z
        return (other.x >> shift) == self.x and (other.y >> shift) == self.y

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_quadkey(cls, quadkey: str) -> 'Tile':
        """Build a tile from its quadkey"""
        from quadtiles.utils.quadkey_calculator import QuadKeyCalculator
        return QuadKeyCalculator.key2tile(quadkey)


@dataclass
class CodecSettings:
    """Data model for codec configuration"""
    max_zoom: int = MAX_ZOOM
    out_of_range: str = 'reject'  # 'reject' or 'truncate'

    def __post_init__(self):
        if self.out_of_range not in OUT_OF_RANGE_POLICIES:
            raise ValidationError(
                f"out_of_range must be one of: {', '.join(OUT_OF_RANGE_POLICIES)}, got {self.out_of_range!r}")

    def is_strict(self) -> bool:
        """Whether out-of-range coordinates are rejected"""
        return self.out_of_range == 'reject'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
