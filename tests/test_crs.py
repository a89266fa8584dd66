"""Mini README: Tests for the CRS converter.

Covers the canonical encodings of both CRS variants, decoding of the
documented examples, and the error raised for every malformed shape.
"""

from __future__ import annotations

import pytest

from geocodec.crs import Linked, Named, crs_from_json, crs_from_object, crs_to_json, crs_to_object
from geocodec.errors import (
    CrsUnknownTypeError,
    GeoJsonError,
    MissingPropertyError,
    TypeMismatchError,
    UnsupportedTypeError,
)


def test_decode_named_crs() -> None:
    crs = crs_from_object({"type": "name", "properties": {"name": "urn:ogc:def:crs:EPSG::4326"}})
    assert crs == Named(name="urn:ogc:def:crs:EPSG::4326")


def test_decode_linked_crs_without_type() -> None:
    crs = crs_from_object({"type": "link", "properties": {"href": "http://example.com/crs.json"}})
    assert crs == Linked(href="http://example.com/crs.json", type_=None)


def test_decode_linked_crs_with_type() -> None:
    crs = crs_from_object({"type": "link", "properties": {"href": "x", "type": "proj4"}})
    assert crs == Linked(href="x", type_="proj4")


def test_encode_uses_canonical_shape_and_key_order() -> None:
    encoded = crs_to_object(Linked(href="http://example.com/crs", type_="ogcwkt"))
    assert encoded == {
        "properties": {"href": "http://example.com/crs", "type": "ogcwkt"},
        "type": "link",
    }
    assert list(encoded) == ["properties", "type"]
    assert list(encoded["properties"]) == ["href", "type"]


def test_encode_omits_absent_link_type() -> None:
    assert crs_to_object(Linked(href="x")) == {"properties": {"href": "x"}, "type": "link"}
    assert crs_to_object(Named(name="EPSG:3857")) == {
        "properties": {"name": "EPSG:3857"},
        "type": "name",
    }


@pytest.mark.parametrize(
    "crs",
    [Named(name="urn:ogc:def:crs:OGC:1.3:CRS84"), Linked(href="a"), Linked(href="b", type_="esriwkt")],
)
def test_round_trip(crs) -> None:
    assert crs_from_object(crs_to_object(crs)) == crs
    assert crs_from_json(crs_to_json(crs)) == crs


def test_missing_name_is_reported() -> None:
    with pytest.raises(MissingPropertyError) as excinfo:
        crs_from_object({"type": "name", "properties": {}})
    assert excinfo.value.key == "name"
    assert "no name" in str(excinfo.value)


def test_missing_properties_is_reported() -> None:
    with pytest.raises(MissingPropertyError, match="no properties"):
        crs_from_object({"type": "name"})


def test_unknown_type_preserves_value() -> None:
    with pytest.raises(CrsUnknownTypeError) as excinfo:
        crs_from_object({"type": "mercator", "properties": {}})
    assert excinfo.value.value == "mercator"


@pytest.mark.parametrize("obj", [{}, {"type": 3, "properties": {}}, {"type": None}])
def test_missing_or_non_string_type_is_unsupported(obj) -> None:
    with pytest.raises(UnsupportedTypeError):
        crs_from_object(obj)


@pytest.mark.parametrize(
    "obj, expected",
    [
        ({"type": "name", "properties": []}, "object"),
        ({"type": "name", "properties": {"name": 4326}}, "string"),
        ({"type": "link", "properties": {"href": None}}, "string"),
        ({"type": "link", "properties": {"href": "x", "type": False}}, "string"),
    ],
)
def test_wrong_kinds_are_type_mismatches(obj, expected) -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        crs_from_object(obj)
    assert excinfo.value.expected == expected


def test_missing_href_is_reported() -> None:
    with pytest.raises(MissingPropertyError, match="no link"):
        crs_from_object({"type": "link", "properties": {"type": "proj4"}})


def test_text_adapter_rejects_non_objects_and_bad_json() -> None:
    with pytest.raises(TypeMismatchError):
        crs_from_json("[]")
    with pytest.raises(GeoJsonError):
        crs_from_json("{not json")
    # Errors remain catchable as ordinary validation failures.
    with pytest.raises(ValueError):
        crs_from_json("{}")


def test_deeply_nested_text_is_a_decode_error() -> None:
    depth = 100000
    with pytest.raises(GeoJsonError):
        crs_from_json("[" * depth + "]" * depth)


def test_empty_name_and_href_are_accepted() -> None:
    assert crs_from_object({"type": "name", "properties": {"name": ""}}) == Named(name="")
    assert crs_from_object({"type": "link", "properties": {"href": ""}}) == Linked(href="")
