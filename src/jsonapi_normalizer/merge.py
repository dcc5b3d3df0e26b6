"""Recursive merge used to combine entity stores and metadata sections."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict


def copy_containers(value: Any) -> Any:
    """Return ``value`` with every mapping and list rebuilt; leaves are shared."""
    if isinstance(value, Mapping):
        return {key: copy_containers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_containers(item) for item in value]
    return value


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``source`` over ``target`` and return the result as a new dict.

    Nested mappings are merged key by key. Any other value in ``source``,
    lists included, replaces the value in ``target`` wholesale. Neither
    argument is modified.
    """
    merged: Dict[str, Any] = copy_containers(target)
    _merge_into(merged, source)
    return merged


def _merge_into(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = copy_containers(value)


__all__ = ["copy_containers", "deep_merge"]
