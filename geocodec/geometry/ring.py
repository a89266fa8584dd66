"""Mini README: Linear ring conversion used by polygon geometry.

Structure:
    * Position - tuple of two or more numbers (x, y[, z, ...]).
    * Ring - ordered tuple of positions forming one polygon boundary.
    * decode_ring / encode_ring - JSON array <-> Ring.

Closure and winding order are not checked; only the JSON shape is.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from ..errors import TypeMismatchError
from ..json_access import JsonArray, Number, expect_array, expect_number

Position = Tuple[Number, ...]
Ring = Tuple[Position, ...]


def decode_position(value: object, context: str = "Position") -> Position:
    """Decode one position, requiring at least two numeric members."""

    members = expect_array(value, context)
    if len(members) < 2:
        raise TypeMismatchError(context, f"array of at least 2 numbers, got {len(members)}", "array")
    return tuple(expect_number(member, f"{context} member {i}") for i, member in enumerate(members))


def decode_ring(value: object, context: str = "Ring") -> Ring:
    """Decode a ring, failing on the first malformed position."""

    entries = expect_array(value, context)
    return tuple(
        decode_position(entry, f"{context} position {index}") for index, entry in enumerate(entries)
    )


def encode_ring(ring: Iterable[Sequence[Number]]) -> JsonArray:
    return [list(position) for position in ring]
