"""Mini README: Polygon geometry as an ordered sequence of rings.

Structure:
    * Poly - immutable polygon value; first ring exterior, the rest holes.
    * poly_to_array / poly_from_array - JSON array <-> Poly.
    * poly_to_json / poly_from_json - text adapters built on ``json``.

Per-ring work is delegated to ``geocodec.geometry.ring``. A malformed ring
fails the whole polygon decode; no ring is ever skipped.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..errors import GeoJsonError
from ..json_access import JsonArray, expect_array
from ..logging_utils import get_logger
from .ring import Ring, decode_ring, encode_ring

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Poly:
    """Ordered rings of a polygon."""

    rings: Tuple[Ring, ...] = ()

    def __post_init__(self) -> None:
        # Rings get the same shape checks as decoded input and are stored as tuples.
        object.__setattr__(
            self,
            "rings",
            tuple(decode_ring(ring, f"Poly ring {index}") for index, ring in enumerate(self.rings)),
        )

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[Ring]:
        return iter(self.rings)

    @property
    def exterior(self) -> Optional[Ring]:
        """Outer boundary, or ``None`` for an empty polygon."""

        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> Tuple[Ring, ...]:
        """Holes cut from the exterior."""

        return self.rings[1:]


def poly_to_array(poly: Poly) -> JsonArray:
    """Encode a polygon as an array of ring arrays, preserving order."""

    return [encode_ring(ring) for ring in poly.rings]


def poly_from_array(value: object) -> Poly:
    """Decode a polygon, aborting on the first ring that fails to decode."""

    entries = expect_array(value, "Polygon")
    rings = []
    for index, entry in enumerate(entries):
        try:
            rings.append(decode_ring(entry, f"Polygon ring {index}"))
        except GeoJsonError:
            LOGGER.debug("Polygon decode failed at ring %s", index)
            raise
    LOGGER.debug("Decoded polygon with %s rings", len(rings))
    return Poly(rings=tuple(rings))


def poly_to_json(poly: Poly, *, indent: Optional[int] = None) -> str:
    """Serialise a polygon to JSON text."""

    return json.dumps(poly_to_array(poly), indent=indent)


def poly_from_json(text: str) -> Poly:
    """Parse JSON text holding polygon coordinates."""

    try:
        value = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as error:
        raise GeoJsonError("Polygon payload is invalid JSON") from error
    return poly_from_array(value)
