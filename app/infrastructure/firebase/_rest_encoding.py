"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

import base64
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Increment:
    """Server-side numeric increment; use a negative amount to decrement."""

    amount: int | float


@dataclass(frozen=True)
class ArrayUnion:
    """Server-side append of elements not already present in an array field."""

    values: tuple


def _encode_value(v: Any) -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc)
        return {"timestampValue": v.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, date):
        return {"stringValue": v.isoformat()}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def split_transforms(data: dict[str, Any]) -> tuple[dict[str, Any], list[dict]]:
    """Separate plain values from Increment/ArrayUnion sentinels.

    Returns the plain fields and the REST ``updateTransforms`` list.
    """
    plain: dict[str, Any] = {}
    transforms: list[dict] = []
    for key, value in data.items():
        if isinstance(value, Increment):
            transforms.append(
                {"fieldPath": key, "increment": _encode_value(value.amount)}
            )
        elif isinstance(value, ArrayUnion):
            transforms.append(
                {
                    "fieldPath": key,
                    "appendMissingElements": {
                        "values": [_encode_value(x) for x in value.values]
                    },
                }
            )
        else:
            plain[key] = value
    return plain, transforms


def encode_document(data: dict[str, Any]) -> dict:
    """Convert a Python dict to Firestore REST Document.fields format."""
    return {"fields": {k: _encode_value(v) for k, v in data.items()}}


def _parse_timestamp(raw: str) -> datetime:
    # Firestore returns up to nanosecond precision; datetime holds microseconds.
    raw = raw.replace("Z", "+00:00")
    if "." in raw:
        head, rest = raw.split(".", 1)
        digits = rest[: len(rest) - len(rest.lstrip("0123456789"))]
        tz = rest[len(digits):]
        raw = f"{head}.{digits[:6].ljust(6, '0')}{tz}"
    return datetime.fromisoformat(raw)


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _parse_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_document(fields: dict | None) -> dict:
    """Convert Firestore REST Document.fields to a Python dict."""
    if not fields:
        return {}
    return {k: _decode_value(v) for k, v in fields.items()}
