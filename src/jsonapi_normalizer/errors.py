"""Exceptions raised when a document cannot be normalized."""

from __future__ import annotations

from typing import Optional


class NormalizationError(Exception):
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class InvalidDocumentError(NormalizationError):
    """The top-level document is not a JSON object."""


class InvalidResourceError(NormalizationError):
    """A resource object is not a JSON object or lacks ``type``/``id``."""


class InvalidOptionError(NormalizationError):
    """An option was supplied with a value of the wrong type."""


__all__ = [
    "InvalidDocumentError",
    "InvalidOptionError",
    "InvalidResourceError",
    "NormalizationError",
]
