"""Conversion between map tile coordinates and quadkeys."""
from quadtiles.models.tile import Tile, CodecSettings
from quadtiles.utils.quadkey_calculator import QuadKeyCalculator
from quadtiles.exceptions.quadkey_exceptions import (
    QuadKeyException,
    InvalidCoordinateError,
    MalformedQuadKeyError,
)

__version__ = '0.1.0'


def tile2key(x: int, y: int, z: int) -> str:
    """Compute quad key string for given x/y tile coordinates and zoom level"""
    return QuadKeyCalculator.tile2key(x, y, z)


def key2tile(quadkey: str) -> Tile:
    """Inverse of tile2key"""
    return QuadKeyCalculator.key2tile(quadkey)


__all__ = [
    'tile2key',
    'key2tile',
    'Tile',
    'CodecSettings',
    'QuadKeyCalculator',
    'QuadKeyException',
    'InvalidCoordinateError',
    'MalformedQuadKeyError',
]
