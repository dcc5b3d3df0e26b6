"""Recursive key normalization for attribute and meta payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, time
from typing import Any

from .casing import camelize


def is_date_like(value: Any) -> bool:
    # datetime.datetime subclasses datetime.date
    return isinstance(value, (date, time))


def camelize_nested_keys(value: Any) -> Any:
    """Return a copy of ``value`` with every mapping key camelized.

    Lists and tuples are rebuilt element by element. Scalars, ``None`` and
    date-like values are returned unchanged (the same object), so a
    ``datetime`` inside an attribute is never turned into a mapping.
    """
    if value is None or is_date_like(value):
        return value
    if isinstance(value, Mapping):
        return {camelize(key): camelize_nested_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [camelize_nested_keys(item) for item in value]
    if isinstance(value, tuple):
        return tuple(camelize_nested_keys(item) for item in value)
    return value


def camelize_top_level(payload: Mapping[str, Any]) -> dict:
    """Camelize the keys of ``payload`` and run every value through :func:`camelize_nested_keys`."""
    return {camelize(key): camelize_nested_keys(item) for key, item in payload.items()}


__all__ = ["camelize_nested_keys", "camelize_top_level", "is_date_like"]
