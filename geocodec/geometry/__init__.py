"""Mini README: Geometry converters.

The package is divided into ``ring`` for linear rings and their positions and
``polygon`` for polygons built from those rings.
"""

from .polygon import Poly, poly_from_array, poly_from_json, poly_to_array, poly_to_json
from .ring import Position, Ring, decode_ring, encode_ring

__all__ = [
    "Poly",
    "Position",
    "Ring",
    "decode_ring",
    "encode_ring",
    "poly_from_array",
    "poly_from_json",
    "poly_to_array",
    "poly_to_json",
]
