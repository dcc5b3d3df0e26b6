"""Type aliases shared across the normalizer modules."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Union

JsonValue = Any
JsonObject = Dict[str, Any]
Resource = Mapping[str, Any]
ResourceIdentifier = Dict[str, Any]
ResourceOrList = Union[Resource, List[Resource]]
EntityStore = Dict[str, Dict[str, JsonObject]]

__all__ = [
    "EntityStore",
    "JsonObject",
    "JsonValue",
    "Resource",
    "ResourceIdentifier",
    "ResourceOrList",
]
