"""Options controlling how a document is normalized."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .errors import InvalidOptionError


@dataclass(frozen=True)
class NormalizeOptions:
    endpoint: Optional[str] = None
    filter_endpoint: bool = True
    camelize_keys: bool = True
    camelize_type_values: bool = True

    def __post_init__(self) -> None:
        if self.endpoint is not None and not isinstance(self.endpoint, str):
            raise InvalidOptionError(f"endpoint must be a string, got {type(self.endpoint).__name__}", "endpoint")

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]]) -> "NormalizeOptions":
        """Build options from a mapping using either snake_case or camelCase names."""
        cfg = cfg or {}
        return cls(
            endpoint=cfg.get("endpoint"),
            filter_endpoint=bool(_lookup(cfg, "filter_endpoint", "filterEndpoint", True)),
            camelize_keys=bool(_lookup(cfg, "camelize_keys", "camelizeKeys", True)),
            camelize_type_values=bool(_lookup(cfg, "camelize_type_values", "camelizeTypeValues", True)),
        )

    @classmethod
    def coerce(cls, options: Any) -> "NormalizeOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_config(options)
        raise InvalidOptionError(f"options must be a mapping or NormalizeOptions, got {type(options).__name__}")

    def clone_with(
        self,
        *,
        endpoint: Optional[str] = None,
        filter_endpoint: Optional[bool] = None,
        camelize_keys: Optional[bool] = None,
        camelize_type_values: Optional[bool] = None,
    ) -> "NormalizeOptions":
        overrides = {
            "endpoint": endpoint,
            "filter_endpoint": filter_endpoint,
            "camelize_keys": camelize_keys,
            "camelize_type_values": camelize_type_values,
        }
        return replace(self, **{name: value for name, value in overrides.items() if value is not None})

    def with_overrides(self, **overrides: Any) -> "NormalizeOptions":
        """Apply keyword overrides given by snake_case or camelCase option name."""
        resolved = {}
        for name, value in overrides.items():
            field_name = _ALIASES.get(name, name)
            if field_name not in _FIELDS:
                raise InvalidOptionError(f"unknown option '{name}'", name)
            resolved[field_name] = value
        return self.clone_with(**resolved)

    @property
    def has_endpoint(self) -> bool:
        return bool(self.endpoint)


_FIELDS = ("endpoint", "filter_endpoint", "camelize_keys", "camelize_type_values")
_ALIASES = {
    "filterEndpoint": "filter_endpoint",
    "camelizeKeys": "camelize_keys",
    "camelizeTypeValues": "camelize_type_values",
}


def _lookup(cfg: Mapping[str, Any], name: str, alias: str, default: Any) -> Any:
    value = cfg.get(name, cfg.get(alias))
    return default if value is None else value


__all__ = ["NormalizeOptions"]
