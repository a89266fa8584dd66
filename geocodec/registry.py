"""Mini README: Registry mapping construct names to converters.

Structure:
    * Converter - pairs a decode callable with its encode counterpart.
    * ConverterRegistry - manages registration and lookup by name.
    * REGISTRY - default instance holding ``crs``, ``polygon`` and ``ring``.

Callers that only know a construct by name (the CLI, host adapters) go
through the registry instead of importing converter functions directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

from .crs import crs_from_object, crs_to_object
from .geometry import decode_ring, encode_ring, poly_from_array, poly_to_array
from .json_access import expect_object
from .logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Converter:
    """Decode/encode pair for one GeoJSON construct."""

    name: str
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]


class ConverterRegistry:
    """Simple registry for mapping construct names to converters."""

    def __init__(self) -> None:
        self._converters: Dict[str, Converter] = {}

    def register(self, converter: Converter) -> None:
        """Register a converter, replacing any previous one of the same name."""

        identifier = converter.name.lower()
        LOGGER.debug("Registering converter '%s'", identifier)
        self._converters[identifier] = converter

    def available(self) -> Iterable[str]:
        """Return registered construct names in sorted order."""

        return sorted(self._converters.keys())

    def get(self, identifier: str) -> Converter:
        converter = self._converters.get(identifier.lower())
        if not converter:
            raise KeyError(f"Unknown construct '{identifier}'")
        return converter


def _decode_crs(value: Any) -> Any:
    return crs_from_object(expect_object(value, "CRS"))


REGISTRY = ConverterRegistry()
REGISTRY.register(Converter("crs", _decode_crs, crs_to_object))
REGISTRY.register(Converter("polygon", poly_from_array, poly_to_array))
REGISTRY.register(Converter("ring", decode_ring, encode_ring))
