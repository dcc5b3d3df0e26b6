"""Reduce JSON:API ``relationships`` objects to resource identifiers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Union

from .casing import camelize
from .keys import camelize_nested_keys
from .types import ResourceIdentifier

LOGGER = logging.getLogger(__name__)


def to_identifier(linkage: Any, *, camelize_type_values: bool = True) -> ResourceIdentifier:
    """Return the minimal ``{"id", "type"}`` pair for a resource or linkage object.

    Anything that is not an object is treated as a linkage with no members.
    """
    if not isinstance(linkage, Mapping):
        linkage = {}
    type_name = linkage.get("type")
    if camelize_type_values and type_name is not None:
        type_name = camelize(type_name)
    return {"id": linkage.get("id"), "type": type_name}


def _extract_linkage(
    data: Any, *, camelize_type_values: bool
) -> Union[None, ResourceIdentifier, List[ResourceIdentifier]]:
    if data is None:
        return None
    if isinstance(data, (list, tuple)):
        return [to_identifier(entry, camelize_type_values=camelize_type_values) for entry in data]
    return to_identifier(data, camelize_type_values=camelize_type_values)


def extract_relationships(
    relationships: Any,
    *,
    camelize_keys: bool = True,
    camelize_type_values: bool = True,
) -> Any:
    """Normalize a resource's ``relationships`` member.

    Each relationship becomes ``{"data", "meta", "links"}`` with ``data``
    reduced to identifiers. ``data: null`` is kept as ``None``. ``meta`` is
    only carried alongside ``data`` and always has its keys camelized.
    Relationships that end up with none of the three members are dropped.
    A ``relationships`` member that is not an object is returned unchanged.
    """
    if relationships is not None and not isinstance(relationships, Mapping):
        LOGGER.debug("relationships_not_an_object", extra={"relationships_type": type(relationships).__name__})
        return relationships
    extracted: Dict[str, Dict[str, Any]] = {}
    for key, relationship in (relationships or {}).items():
        if not isinstance(relationship, Mapping):
            LOGGER.debug("relationship_not_an_object", extra={"relationship": key})
            continue
        name = camelize(key) if camelize_keys else key
        entry: Dict[str, Any] = {}

        if "data" in relationship:
            entry["data"] = _extract_linkage(relationship["data"], camelize_type_values=camelize_type_values)
            if "meta" in relationship:
                entry["meta"] = camelize_nested_keys(relationship["meta"])

        links = relationship.get("links")
        if links is not None:
            entry["links"] = camelize_nested_keys(links) if camelize_keys else links

        extracted[name] = entry

    return {name: entry for name, entry in extracted.items() if entry}


__all__ = ["extract_relationships", "to_identifier"]
