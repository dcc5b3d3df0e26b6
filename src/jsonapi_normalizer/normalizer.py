"""Top-level JSON:API document normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Union

from .entities import extract_entities
from .errors import InvalidDocumentError
from .merge import deep_merge
from .meta import extract_metadata
from .options import NormalizeOptions

LOGGER = logging.getLogger(__name__)

OptionsLike = Union[NormalizeOptions, Mapping[str, Any], None]


def normalize(document: Mapping[str, Any], options: OptionsLike = None, **overrides: Any) -> Dict[str, Any]:
    """Flatten a JSON:API document into ``{type: {id: entity}}``.

    Entities from ``data`` and ``included`` are merged on ``(type, id)``.
    When an endpoint is configured the result also carries a ``meta`` key
    describing the primary data, links and meta for that endpoint.

    ``options`` may be a :class:`NormalizeOptions` or a plain mapping using
    either ``camelize_keys`` or ``camelizeKeys`` style names; keyword
    ``overrides`` win over both.
    """
    resolved = NormalizeOptions.coerce(options).with_overrides(**overrides)
    if not isinstance(document, Mapping):
        raise InvalidDocumentError(f"document must be an object, got {type(document).__name__}")

    LOGGER.debug("normalize_started", extra={"endpoint": resolved.endpoint})
    flags = {
        "camelize_keys": resolved.camelize_keys,
        "camelize_type_values": resolved.camelize_type_values,
    }
    result: Dict[str, Any] = {}

    data = document.get("data")
    if data is not None:
        result = deep_merge(result, extract_entities(data, section="data", **flags))

    included = document.get("included")
    if included is not None:
        result = deep_merge(result, extract_entities(included, section="included", **flags))

    if resolved.has_endpoint:
        metadata = extract_metadata(document, resolved.endpoint, filter_endpoint=resolved.filter_endpoint, **flags)
        result = deep_merge(result, metadata)

    LOGGER.debug(
        "normalize_completed",
        extra={
            "endpoint": resolved.endpoint,
            "entity_counts": {key: len(value) for key, value in result.items() if key != "meta"},
        },
    )
    return result


class JsonApiNormalizer:
    """Normalize many documents with one set of options."""

    def __init__(self, options: OptionsLike = None, **overrides: Any) -> None:
        self.options = NormalizeOptions.coerce(options).with_overrides(**overrides)

    def normalize(self, document: Mapping[str, Any], **overrides: Any) -> Dict[str, Any]:
        return normalize(document, self.options, **overrides)

    def __call__(self, document: Mapping[str, Any], **overrides: Any) -> Dict[str, Any]:
        return self.normalize(document, **overrides)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"


__all__ = ["JsonApiNormalizer", "normalize"]
