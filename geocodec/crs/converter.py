"""Mini README: Conversion between CRS JSON objects and typed values.

Structure:
    * crs_to_object / crs_from_object - work on the decoded JSON tree.
    * crs_to_json / crs_from_json - text adapters built on ``json``.

Wire grammar::

    { "type": "name", "properties": { "name": String } }
    { "type": "link", "properties": { "href": String, "type"?: String } }
"""

from __future__ import annotations

import json
from typing import Optional

from ..errors import CrsUnknownTypeError, GeoJsonError, TypeMismatchError, json_kind
from ..json_access import JsonObject, expect_object, expect_property, expect_string, expect_type
from ..logging_utils import get_logger
from .model import Crs, Linked, Named

LOGGER = get_logger(__name__)

NAMED = "name"
LINKED = "link"


def crs_to_object(crs: Crs) -> JsonObject:
    """Encode a CRS value into its canonical JSON object."""

    if isinstance(crs, Named):
        type_ = NAMED
        properties = {"name": crs.name}
    elif isinstance(crs, Linked):
        type_ = LINKED
        properties = {"href": crs.href}
        if crs.type_ is not None:
            properties["type"] = crs.type_
    else:
        raise TypeError(f"Expected Named or Linked CRS, got {type(crs).__name__}")
    return {"properties": properties, "type": type_}


def crs_from_object(obj: JsonObject) -> Crs:
    """Decode a CRS JSON object, raising ``GeoJsonError`` subclasses on bad shape."""

    type_ = expect_type(obj, "CRS")
    properties = expect_object(
        expect_property(obj, "properties", "CRS", "Encountered CRS object type with no properties"),
        "CRS properties",
    )

    if type_ == NAMED:
        name = expect_string(
            expect_property(
                properties, "name", "Named CRS", "Encountered Named CRS object with no name"
            ),
            "Named CRS name",
        )
        crs: Crs = Named(name=name)
    elif type_ == LINKED:
        href = expect_string(
            expect_property(
                properties, "href", "Linked CRS", "Encountered Linked CRS object with no link"
            ),
            "Linked CRS href",
        )
        link_type: Optional[str] = None
        if "type" in properties:
            link_type = expect_string(properties["type"], "Linked CRS type")
        crs = Linked(href=href, type_=link_type)
    else:
        LOGGER.debug("Rejecting CRS with unknown type %r", type_)
        raise CrsUnknownTypeError(type_)

    LOGGER.debug("Decoded %s CRS", type_)
    return crs


def crs_to_json(crs: Crs, *, indent: Optional[int] = None) -> str:
    """Serialise a CRS value to JSON text."""

    return json.dumps(crs_to_object(crs), indent=indent)


def crs_from_json(text: str) -> Crs:
    """Parse JSON text holding a CRS object."""

    try:
        value = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as error:
        raise GeoJsonError("CRS payload is invalid JSON") from error
    if not isinstance(value, dict):
        raise TypeMismatchError("CRS", "object", json_kind(value))
    return crs_from_object(value)
