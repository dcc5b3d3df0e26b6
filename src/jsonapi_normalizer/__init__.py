"""Normalize JSON:API documents into flat, type/id keyed stores."""

from .casing import camelize, split_words
from .entities import extract_entities
from .errors import (
    InvalidDocumentError,
    InvalidOptionError,
    InvalidResourceError,
    NormalizationError,
)
from .keys import camelize_nested_keys, is_date_like
from .merge import deep_merge
from .meta import extract_metadata, split_endpoint
from .normalizer import JsonApiNormalizer, normalize
from .options import NormalizeOptions
from .relationships import extract_relationships, to_identifier

__all__ = [
    "camelize",
    "split_words",
    "camelize_nested_keys",
    "is_date_like",
    "deep_merge",
    "extract_entities",
    "extract_relationships",
    "to_identifier",
    "extract_metadata",
    "split_endpoint",
    "normalize",
    "JsonApiNormalizer",
    "NormalizeOptions",
    "NormalizationError",
    "InvalidDocumentError",
    "InvalidOptionError",
    "InvalidResourceError",
]
