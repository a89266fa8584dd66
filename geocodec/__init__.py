"""Mini README: geocodec package initialiser.

geocodec converts between JSON values and typed GeoJSON Coordinate Reference
System objects and polygon geometry. The ``crs`` and ``geometry`` packages
hold the converters, ``errors`` the exception taxonomy, and ``registry`` a
name-based lookup used by the command line tool.
"""

from .crs import Crs, Linked, Named, crs_from_json, crs_from_object, crs_to_json, crs_to_object
from .errors import (
    CrsUnknownTypeError,
    GeoJsonError,
    MissingPropertyError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .geometry import Poly, poly_from_array, poly_from_json, poly_to_array, poly_to_json
from .logging_utils import get_logger

__all__ = [
    "Crs",
    "CrsUnknownTypeError",
    "GeoJsonError",
    "Linked",
    "MissingPropertyError",
    "Named",
    "Poly",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "crs_from_json",
    "crs_from_object",
    "crs_to_json",
    "crs_to_object",
    "get_logger",
    "poly_from_array",
    "poly_from_json",
    "poly_to_array",
    "poly_to_json",
]
