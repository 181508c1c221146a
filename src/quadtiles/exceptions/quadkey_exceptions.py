class QuadKeyException(Exception):
    """Base exception for quadkey conversions"""
    pass


class InvalidCoordinateError(QuadKeyException):
    """Tile coordinates outside the grid of their zoom level"""
    pass


class MalformedQuadKeyError(QuadKeyException):
    """Quadkey that is not a string over the digits 0-3"""
    pass


class ConfigurationError(QuadKeyException):
    """Configuration related errors"""
    pass


class ValidationError(QuadKeyException):
    """Validation related errors"""
    pass
