"""Build the type/id keyed entity store from JSON:API resource objects."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List

from .casing import camelize
from .errors import InvalidResourceError
from .keys import camelize_top_level
from .relationships import extract_relationships
from .types import EntityStore, JsonObject, Resource, ResourceOrList

LOGGER = logging.getLogger(__name__)


def wrap(value: Any) -> List[Any]:
    """Return ``value`` as a list; a single resource becomes a one-element list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def validate_resource(resource: Any, path: str) -> Resource:
    if not isinstance(resource, Mapping):
        raise InvalidResourceError(f"resource must be an object, got {type(resource).__name__}", path)
    for member in ("type", "id"):
        if resource.get(member) is None:
            raise InvalidResourceError(f"resource is missing '{member}'", path)
    return resource


def extract_entities(
    resources: ResourceOrList,
    *,
    camelize_keys: bool = True,
    camelize_type_values: bool = True,
    section: str = "data",
) -> EntityStore:
    """Group ``resources`` into ``{type: {id: entity}}``.

    A resource repeated within ``resources`` updates the entity created for
    its first occurrence. ``section`` only labels error paths.
    """
    store: EntityStore = {}
    for index, raw in enumerate(wrap(resources)):
        resource = validate_resource(raw, f"{section}[{index}]")
        type_name = resource["type"]
        resource_id = resource["id"]
        store_key = camelize(type_name) if camelize_keys else type_name

        by_id = store.setdefault(store_key, {})
        if resource_id in by_id:
            LOGGER.debug(
                "resource_duplicate_in_batch",
                extra={"section": section, "type": type_name, "id": resource_id},
            )
        entity = by_id.setdefault(resource_id, {"id": resource_id})
        _populate_entity(entity, resource, camelize_keys=camelize_keys, camelize_type_values=camelize_type_values)
    return store


def _populate_entity(
    entity: JsonObject,
    resource: Resource,
    *,
    camelize_keys: bool,
    camelize_type_values: bool,
) -> None:
    type_name = resource["type"]
    entity["type"] = camelize(type_name) if camelize_type_values else type_name
    entity["attributes"] = _payload(resource.get("attributes"), camelize_keys) or {}

    links = resource.get("links")
    if isinstance(links, Mapping):
        # link values are copied as-is, only the link names are camelized
        entity["links"] = {(camelize(key) if camelize_keys else key): value for key, value in links.items()}
    elif links is not None:
        entity["links"] = links

    relationships = resource.get("relationships")
    if relationships is not None:
        entity["relationships"] = extract_relationships(
            relationships,
            camelize_keys=camelize_keys,
            camelize_type_values=camelize_type_values,
        )

    meta = resource.get("meta")
    if meta is not None:
        entity["meta"] = _payload(meta, camelize_keys)


def _payload(value: Any, camelize_keys: bool) -> Any:
    if not isinstance(value, Mapping) or not camelize_keys:
        return value
    return camelize_top_level(value)


__all__ = ["extract_entities", "validate_resource", "wrap"]
