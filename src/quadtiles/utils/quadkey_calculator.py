"""
Quad keys index map tiles.

At zoom level N every tile is identified by a string of length N over the
characters '0', '1', '2' and '3'. Stripping the last character of a key gives
the key of the containing tile at level N-1, e.g. tile "032" lies inside "03".

    zoom 1      zoom 2
    ---------   ---------------------
    | 0 | 1 |   | 00 | 01 | 10 | 11 |
    ---------   ---------------------
    | 2 | 3 |   | 02 | 03 | 12 | 13 |
    ---------   ---------------------
                | 20 | 21 | 30 | 31 |
                ---------------------
                | 22 | 23 | 32 | 33 |
                ---------------------

Tile (x=3, y=5) at zoom 3:

    x = 3 = "011" (binary, padded to z digits)
    y = 5 = "101"
    interleave y then x bits -> "100111" (binary) -> "213" (base-4)

See https://msdn.microsoft.com/en-us/library/bb259689.aspx
"""
import math
import numbers
from typing import Any, Dict, List, Optional

from shapely.geometry import box, shape
from shapely.prepared import prep

from quadtiles.models.tile import Tile, MAX_ZOOM
from quadtiles.utils.number_utils import NumberUtils
from quadtiles.exceptions.quadkey_exceptions import InvalidCoordinateError, MalformedQuadKeyError

QUADKEY_DIGITS = frozenset('0123')


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class QuadKeyCalculator:
    """Utility class for quadkey <-> tile coordinate conversions"""

    @staticmethod
    def validate_zoom(z: Any, max_zoom: int = MAX_ZOOM) -> None:
        """Validate a zoom level"""
        if not _is_int(z):
            raise InvalidCoordinateError(f"Zoom level must be an integer, got {z!r}")
        if z < 0 or z > max_zoom:
            raise InvalidCoordinateError(f"Zoom level {z} outside 0..{max_zoom}")

    @staticmethod
    def validate_tile(x: Any, y: Any, z: int) -> None:
        """Validate tile coordinates against the grid of zoom z"""
        n = 1 << z
        for name, value in (('x', x), ('y', y)):
            if not _is_int(value):
                raise InvalidCoordinateError(f"Tile {name} must be an integer, got {value!r}")
            if value < 0 or value >= n:
                raise InvalidCoordinateError(
                    f"Tile {name}={value} outside 0..{n - 1} at zoom {z}")

    @staticmethod
    def validate_quadkey(quadkey: Any, max_zoom: int = MAX_ZOOM) -> None:
        """Validate a quadkey string"""
        if not isinstance(quadkey, str):
            raise MalformedQuadKeyError(
                f"Quadkey must be a string, got {type(quadkey).__name__}")
        if len(quadkey) > max_zoom:
            raise MalformedQuadKeyError(
                f"Quadkey length {len(quadkey)} exceeds max zoom {max_zoom}")
        invalid = set(quadkey) - QUADKEY_DIGITS
        if invalid:
            raise MalformedQuadKeyError(
                f"Quadkey {quadkey!r} contains invalid characters: {''.join(sorted(invalid))!r}")

    @staticmethod
    def tile2key(x: int, y: int, z: int, strict: bool = True, max_zoom: int = MAX_ZOOM) -> str:
        """Compute quadkey string for given x/y tile coordinates and zoom level.

        With strict=False coordinates of x >= 2^z or y >= 2^z lose their
        high-order bits instead of raising InvalidCoordinateError.
        """
        QuadKeyCalculator.validate_zoom(z, max_zoom)
        if z == 0:
            return ''

        if strict:
            QuadKeyCalculator.validate_tile(x, y, z)
        else:
            for name, value in (('x', x), ('y', y)):
                if not _is_int(value) or value < 0:
                    raise InvalidCoordinateError(
                        f"Tile {name} must be a non-negative integer, got {value!r}")
            mask = (1 << z) - 1
            x, y = x & mask, y & mask

        x_bin = NumberUtils.zfill(NumberUtils.convert_base(str(x), 10, 2), z)
        y_bin = NumberUtils.zfill(NumberUtils.convert_base(str(y), 10, 2), z)

        # rows (y) come first
        bits = ''.join(y_bit + x_bit for y_bit, x_bit in zip(y_bin, x_bin))

        # leading zero digits are dropped by the base conversion
        quadkey = NumberUtils.convert_base(bits, 2, 4)
        return NumberUtils.zfill(quadkey, z)

    @staticmethod
    def key2tile(quadkey: str, max_zoom: int = MAX_ZOOM) -> Tile:
        """Inverse of tile2key"""
        QuadKeyCalculator.validate_quadkey(quadkey, max_zoom)
        zoom = len(quadkey)
        if zoom == 0:
            return Tile(0, 0, 0)

        bits = NumberUtils.zfill(NumberUtils.convert_base(quadkey, 4, 2), zoom * 2)

        y_bin = bits[0::2]
        x_bin = bits[1::2]

        x = int(NumberUtils.convert_base(x_bin, 2, 10))
        y = int(NumberUtils.convert_base(y_bin, 2, 10))
        return Tile(x, y, zoom)

    @staticmethod
    def parent_key(quadkey: str) -> str:
        """Get quadkey of the containing tile"""
        QuadKeyCalculator.validate_quadkey(quadkey)
        if not quadkey:
            raise MalformedQuadKeyError("Root quadkey has no parent")
        return quadkey[:-1]

    @staticmethod
    def child_keys(quadkey: str) -> List[str]:
        """Get quadkeys of the four tiles inside the given one"""
        QuadKeyCalculator.validate_quadkey(quadkey, MAX_ZOOM - 1)
        return [quadkey + digit for digit in '0123']

    @staticmethod
    def is_ancestor(ancestor: str, quadkey: str) -> bool:
        """Check if quadkey lies inside ancestor"""
        QuadKeyCalculator.validate_quadkey(ancestor)
        QuadKeyCalculator.validate_quadkey(quadkey)
        return quadkey.startswith(ancestor)

    @staticmethod
    def tile_bounds(x: int, y: int, z: int) -> List[float]:
        """Return tile bounds [min_x, min_y, max_x, max_y] within the unit square.

        y grows downward, matching tile rows.
        """
        QuadKeyCalculator.validate_zoom(z)
        QuadKeyCalculator.validate_tile(x, y, z)
        n = 2 ** z
        return [x / n, y / n, (x + 1) / n, (y + 1) / n]

    @staticmethod
    def get_keys_for_polygon(polygon_geojson: Dict[str, Any], zoom: int,
                             bbox_hint: Optional[List[float]] = None) -> List[str]:
        """Quadkeys of tiles at zoom intersecting a GeoJSON geometry in unit-square coordinates"""
        QuadKeyCalculator.validate_zoom(zoom)
        poly = shape(polygon_geojson)
        poly = poly.buffer(0) if not poly.is_valid else poly
        if poly.is_empty:
            return []
        prepared = prep(poly)
        # edge contact only counts for points and lines
        areal = poly.area > 0

        if bbox_hint is None:
            bbox_hint = list(poly.bounds)
        min_x, min_y, max_x, max_y = bbox_hint

        n = 2 ** zoom
        # a bound on a grid line also reaches the tile before it
        x_start = min(max(int(math.ceil(min_x * n)) - 1, 0), n - 1)
        x_end = min(max(int(math.floor(max_x * n)), 0), n - 1)
        y_start = min(max(int(math.ceil(min_y * n)) - 1, 0), n - 1)
        y_end = min(max(int(math.floor(max_y * n)), 0), n - 1)

        keys: List[str] = []
        for y in range(y_start, y_end + 1):
            for x in range(x_start, x_end + 1):
                tb = QuadKeyCalculator.tile_bounds(x, y, zoom)
                tile_poly = box(tb[0], tb[1], tb[2], tb[3])
                if prepared.intersects(tile_poly) and not (areal and prepared.touches(tile_poly)):
                    keys.append(QuadKeyCalculator.tile2key(x, y, zoom))

        return keys
