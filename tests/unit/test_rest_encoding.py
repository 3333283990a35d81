"""Tests for Firestore REST value encoding and write transforms."""

from datetime import datetime, timezone

from app.infrastructure.firebase._rest_client import _create_write, _update_write
from app.infrastructure.firebase._rest_encoding import (
    ArrayUnion,
    Increment,
    _parse_timestamp,
    decode_document,
    encode_document,
    split_transforms,
)


def test_encode_scalar_types() -> None:
    fields = encode_document(
        {"n": 3, "x": 2.5, "ok": True, "none": None, "s": "PET"}
    )["fields"]
    assert fields["n"] == {"integerValue": "3"}
    assert fields["x"] == {"doubleValue": 2.5}
    assert fields["ok"] == {"booleanValue": True}
    assert fields["none"] == {"nullValue": None}
    assert fields["s"] == {"stringValue": "PET"}


def test_nested_items_decode_back() -> None:
    data = {
        "items": [{"material_id": "m1", "weight": 12.5}],
        "date": datetime(2025, 3, 10, 8, 30, tzinfo=timezone.utc),
    }
    decoded = decode_document(encode_document(data)["fields"])
    assert decoded == data


def test_timestamp_with_nanoseconds_is_truncated() -> None:
    parsed = _parse_timestamp("2025-03-10T08:30:00.123456789Z")
    assert parsed == datetime(2025, 3, 10, 8, 30, 0, 123456, tzinfo=timezone.utc)


def test_split_transforms_separates_sentinels() -> None:
    plain, transforms = split_transforms(
        {"stock": Increment(-4.5), "payments": ArrayUnion(({"id": "p1"},)), "a": 1}
    )
    assert plain == {"a": 1}
    assert transforms[0] == {"fieldPath": "stock", "increment": {"doubleValue": -4.5}}
    assert transforms[1]["fieldPath"] == "payments"
    assert transforms[1]["appendMissingElements"]["values"][0] == {
        "mapValue": {"fields": {"id": {"stringValue": "p1"}}}
    }


def test_update_write_requires_existing_document() -> None:
    write = _update_write("docs/materials/m1", {"stock": Increment(2), "name": "PET"})
    assert write["currentDocument"] == {"exists": True}
    assert write["updateMask"] == {"fieldPaths": ["name"]}
    assert write["updateTransforms"][0]["fieldPath"] == "stock"


def test_create_write_requires_missing_document() -> None:
    write = _create_write("docs/sales/s1", {"total": 10.0})
    assert write["currentDocument"] == {"exists": False}
    assert "updateMask" not in write
