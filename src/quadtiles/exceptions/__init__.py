from quadtiles.exceptions.quadkey_exceptions import (
    QuadKeyException,
    InvalidCoordinateError,
    MalformedQuadKeyError,
    ConfigurationError,
    ValidationError,
)

__all__ = [
    'QuadKeyException',
    'InvalidCoordinateError',
    'MalformedQuadKeyError',
    'ConfigurationError',
    'ValidationError',
]
