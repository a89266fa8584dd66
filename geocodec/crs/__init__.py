"""Mini README: Coordinate Reference System subsystem.

Re-exports the typed CRS variants from ``model`` and the JSON converters from
``converter``.
"""

from .converter import crs_from_json, crs_from_object, crs_to_json, crs_to_object
from .model import Crs, Linked, Named

__all__ = [
    "Crs",
    "Linked",
    "Named",
    "crs_from_json",
    "crs_from_object",
    "crs_to_json",
    "crs_to_object",
]
