"""
Quadraster Exceptions

Exception hierarchy for error handling.

Queries that simply cannot be satisfied (box off the map, non-positive
viewport width) are not errors: they come back as a failed RasterResult.
"""


class QuadrasterError(Exception):
    """Base exception for Quadraster"""

    pass


class ConfigurationError(QuadrasterError):
    """Tile set configuration is invalid; no queries can be served"""

    pass


class AddressingError(QuadrasterError):
    """Tile index or identity is invalid, or navigation left the tree"""

    pass


class GeometryError(AddressingError):
    """Tile geometry or grid assembly is inconsistent"""

    pass


class QueryError(QuadrasterError):
    """Query parameters are missing or malformed"""

    pass
