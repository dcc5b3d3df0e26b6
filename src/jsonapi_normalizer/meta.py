"""Endpoint-scoped metadata section of a normalized document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

from .entities import wrap
from .relationships import extract_relationships, to_identifier
from .types import JsonObject


def split_endpoint(endpoint: str) -> Tuple[str, str]:
    """Split ``endpoint`` into its base path and query string.

    ``"/articles?include=author"`` -> ``("/articles", "?include=author")``;
    the query part is ``""`` when there is no ``?``.
    """
    base, separator, query = endpoint.partition("?")
    return base, separator + query


def extract_metadata(
    document: Mapping[str, Any],
    endpoint: str,
    *,
    camelize_keys: bool = True,
    camelize_type_values: bool = True,
    filter_endpoint: bool = True,
) -> Dict[str, Dict[str, Any]]:
    """Build ``{"meta": {...}}`` for ``document`` fetched from ``endpoint``.

    With ``filter_endpoint`` the entry lives under the base path and, when the
    endpoint has a query string, one level deeper under that query string.
    Without it the raw endpoint is the key. Document links are also exposed
    under the base path in every case.
    """
    base_path, query = split_endpoint(endpoint)
    section: Dict[str, Any] = {}
    meta_object: JsonObject = {}

    if not filter_endpoint:
        section[endpoint] = meta_object
    elif query:
        section[base_path] = {query: meta_object}
    else:
        section[base_path] = meta_object

    meta_object["data"] = {}
    data = document.get("data")
    if data is not None:
        meta_object["data"] = _primary_identifiers(
            data,
            camelize_keys=camelize_keys,
            camelize_type_values=camelize_type_values,
        )

    links = document.get("links")
    if links is not None:
        meta_object["links"] = links
        section.setdefault(base_path, {})["links"] = links

    meta = document.get("meta")
    if meta is not None:
        meta_object["meta"] = meta

    return {"meta": section}


def _primary_identifiers(data: Any, *, camelize_keys: bool, camelize_type_values: bool) -> List[JsonObject]:
    identifiers: List[JsonObject] = []
    for resource in wrap(data):
        identifier: JsonObject = to_identifier(resource, camelize_type_values=camelize_type_values)
        relationships = resource.get("relationships")
        if relationships is not None:
            identifier["relationships"] = extract_relationships(
                relationships,
                camelize_keys=camelize_keys,
                camelize_type_values=camelize_type_values,
            )
        identifiers.append(identifier)
    return identifiers


__all__ = ["extract_metadata", "split_endpoint"]
