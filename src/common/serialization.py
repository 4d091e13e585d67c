"""Serialization utilities."""

from dataclasses import fields, is_dataclass
from datetime import datetime
from typing import Any


def to_camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _serialize_value(value: Any, camel_case: bool) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return serialize_dataclass(value, camel_case=camel_case)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize_value(v, camel_case) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v, camel_case) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_serialize_value(v, camel_case) for v in value)
    return value


def serialize_dataclass(obj, camel_case: bool = False) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings.

    Nested dataclasses, lists and dicts are serialized recursively. With
    ``camel_case`` the field names are emitted in camelCase, which is the
    shape the downstream JSON consumers expect.
    """
    data = {}
    for field in fields(obj):
        key = to_camel_case(field.name) if camel_case else field.name
        data[key] = _serialize_value(getattr(obj, field.name), camel_case)
    return data
