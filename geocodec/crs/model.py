"""Mini README: Typed Coordinate Reference System values.

Structure:
    * Named - CRS identified by a well-known name such as an OGC URN.
    * Linked - CRS identified by a dereferenceable link plus an optional
      media-type hint.
    * Crs - union alias covering both variants.

See GeoJSON (2008) section 3, "Coordinate Reference System Objects".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Named:
    """Named CRS, e.g. ``urn:ogc:def:crs:EPSG::4326``."""

    name: str


@dataclass(frozen=True, slots=True)
class Linked:
    """Linked CRS whose definition lives at ``href``."""

    href: str
    type_: Optional[str] = None


Crs = Union[Named, Linked]
