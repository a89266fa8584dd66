"""Mini README: Error taxonomy raised while decoding GeoJSON structures.

Structure:
    * GeoJsonError - base class, a ``ValueError`` so callers validating
      payloads can catch it the same way as other malformed input.
    * MissingPropertyError - a required field was absent.
    * TypeMismatchError - a field existed but had the wrong JSON kind.
    * UnsupportedTypeError - the ``"type"`` discriminant was missing or not
      a string.
    * CrsUnknownTypeError - the CRS discriminant named an unknown variant.

Encoding never raises; every error here originates from a decode path.
"""

from __future__ import annotations

from typing import Optional


def json_kind(value: object) -> str:
    """Name the JSON kind of a decoded value for diagnostics."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class GeoJsonError(ValueError):
    """Base class for all decode failures."""


class MissingPropertyError(GeoJsonError):
    """A required property was absent from a JSON object."""

    def __init__(self, context: str, key: str, message: Optional[str] = None) -> None:
        self.context = context
        self.key = key
        super().__init__(message or f"{context}: missing required property '{key}'")


class TypeMismatchError(GeoJsonError):
    """A property was present but held the wrong JSON kind."""

    def __init__(self, context: str, expected: str, found: str) -> None:
        self.context = context
        self.expected = expected
        self.found = found
        super().__init__(f"{context}: expected {expected}, found {found}")


class UnsupportedTypeError(GeoJsonError):
    """The ``"type"`` member was missing or was not a string."""

    def __init__(self, context: str = "GeoJSON object") -> None:
        self.context = context
        super().__init__(f"{context}: encountered unsupported or missing 'type' member")


class CrsUnknownTypeError(GeoJsonError):
    """The CRS ``"type"`` member named neither ``name`` nor ``link``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Encountered unknown CRS type '{value}'")
