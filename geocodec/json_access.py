"""Mini README: Checked accessors over the generic JSON value tree.

Structure:
    * expect_type - read the string ``"type"`` discriminant.
    * expect_property - look up a required key.
    * expect_object / expect_array / expect_string / expect_number - assert
      the JSON kind of a value.

The tree is whatever ``json.loads`` produces: dicts, lists, strings, numbers,
booleans and ``None``. Each helper returns the value unchanged on success and
raises the matching error from ``geocodec.errors`` otherwise.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .errors import MissingPropertyError, TypeMismatchError, UnsupportedTypeError, json_kind

JsonObject = Dict[str, Any]
JsonArray = List[Any]
Number = Union[int, float]


def expect_type(obj: JsonObject, context: str = "GeoJSON object") -> str:
    type_ = obj.get("type")
    if not isinstance(type_, str):
        raise UnsupportedTypeError(context)
    return type_


def expect_property(
    obj: JsonObject, key: str, context: str, message: Optional[str] = None
) -> Any:
    if key not in obj:
        raise MissingPropertyError(context, key, message)
    return obj[key]


def expect_object(value: Any, context: str) -> JsonObject:
    if not isinstance(value, dict):
        raise TypeMismatchError(context, "object", json_kind(value))
    return value


def expect_array(value: Any, context: str) -> JsonArray:
    # Tuples are accepted so that encoder output can be fed straight back in.
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(context, "array", json_kind(value))
    return value


def expect_string(value: Any, context: str) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(context, "string", json_kind(value))
    return value


def expect_number(value: Any, context: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatchError(context, "number", json_kind(value))
    return value
