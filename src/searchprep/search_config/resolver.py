"""Resolve per-field query-time search configuration.

The user configuration controls, per field of the index:

1. query-time boosting (``boost``, per field only; 0 leaves a field out of
   scoring while it is still tokenized),
2. the boolean model for terms within a field (``bool``, per field or
   global; the per-field value wins),
3. whether all fields or any field must match (``fieldBool``, global only),
4. token expansion for recall (``expand``, per field or global; the
   per-field value wins).

Example::

    {
      "fields": {
        "title": {"boost": 2, "bool": "AND", "expand": true},
        "body": {"boost": 1}
      },
      "bool": "OR",
      "fieldBool": "OR"
    }

Whatever the input, the resolved mapping holds exactly one entry per known
field. Unparseable input falls back to defaults with a warning; unknown
field names are dropped with a warning, and a known field whose entry is
invalid gets the global values with a warning.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from searchprep.config.constants import (
    DEFAULT_BOOL,
    DEFAULT_BOOST,
    DEFAULT_EXPAND,
    DEFAULT_FIELD_BOOL,
)
from searchprep.config.settings import Settings
from searchprep.exceptions import InvalidArgumentError
from searchprep.models.domain import Configuration, FieldConfig
from searchprep.models.schemas import UserFieldConfig, UserSearchConfig
from searchprep.observability.logger import get_logger
from searchprep.search_config.parser import (
    ParseFailure,
    format_validation_error,
    parse_search_config,
)
from searchprep.utils.text import warn

logger = get_logger("search_config")


@dataclass
class _GlobalOverrides:
    bool_model: str = DEFAULT_BOOL
    expand: bool = DEFAULT_EXPAND
    field_bool: str = DEFAULT_FIELD_BOOL

    @classmethod
    def from_user(cls, user: UserSearchConfig) -> _GlobalOverrides:
        return cls(
            bool_model=user.bool_model or DEFAULT_BOOL,
            expand=user.expand or DEFAULT_EXPAND,
            field_bool=user.field_bool or DEFAULT_FIELD_BOOL,
        )

    def field_config(self, spec: UserFieldConfig | None = None) -> FieldConfig:
        if spec is None:
            return FieldConfig(
                boost=DEFAULT_BOOST,
                bool_model=self.bool_model,
                field_bool=self.field_bool,
                expand=self.expand,
            )
        return FieldConfig(
            boost=spec.boost if spec.boost is not None else DEFAULT_BOOST,
            bool_model=spec.bool_model or self.bool_model,
            field_bool=self.field_bool,
            expand=spec.expand if spec.expand is not None else self.expand,
        )


def _known_fields(fields: Iterable[str] | None) -> list[str]:
    if fields is None:
        raise InvalidArgumentError("fields should not be None")
    if isinstance(fields, (str, bytes)):
        raise InvalidArgumentError("fields must be a sequence of field names, not a string")
    # Collapse duplicates, keep caller order
    return list(dict.fromkeys(fields))


class SearchConfiguration:
    """Per-field search configuration for one index.

    Callers should treat the mapping returned by ``get`` as read-only.
    """

    def __init__(self, config: Any, fields: Iterable[str] | None) -> None:
        self._config: Configuration = {}
        self.resolve(config, fields)

    @classmethod
    def from_settings(cls, settings: Settings, fields: Iterable[str] | None) -> SearchConfiguration:
        return cls(settings.search_config, fields)

    def resolve(self, config: Any, fields: Iterable[str] | None) -> Configuration:
        """(Re)build the mapping from raw user input."""
        known = _known_fields(fields)

        result = parse_search_config(config)
        if isinstance(result, ParseFailure):
            warn(
                "search_config_parse_failed",
                reason=result.reason,
                detail="user configuration parse failed, will use default configuration",
            )
            self.build_default(known)
        else:
            self.build_from_user(result.config, known)

        logger.debug("search_config_resolved", field_count=len(self._config))
        return self._config

    def build_default(self, fields: Iterable[str]) -> None:
        self.reset()
        for field in fields:
            self._config[field] = FieldConfig()

    def build_from_user(self, user: UserSearchConfig, fields: Iterable[str]) -> None:
        self.reset()
        known = list(fields)
        overrides = _GlobalOverrides.from_user(user)

        if user.field_specs is None:
            for field in known:
                self._config[field] = overrides.field_config()
            return

        known_set = set(known)
        for name in user.field_specs:
            if name not in known_set:
                warn(
                    "unknown_search_field",
                    field=name,
                    detail="field name in user configuration not found in index fields",
                )

        for field in known:
            spec = None
            if field in user.field_specs:
                spec = self._field_spec(field, user.field_specs[field])
            self._config[field] = overrides.field_config(spec)

    @staticmethod
    def _field_spec(field: str, raw: Any) -> UserFieldConfig | None:
        """Validate one known field's entry; an invalid entry falls back to the globals."""
        try:
            return UserFieldConfig.model_validate(raw)
        except ValidationError as e:
            warn(
                "invalid_search_field",
                field=field,
                reason=format_validation_error(e),
                detail="field configuration is invalid, will use global configuration",
            )
            return None

    def get(self) -> Configuration:
        return self._config

    def reset(self) -> None:
        self._config = {}

    def to_dict(self) -> dict[str, dict]:
        return {field: cfg.to_dict() for field, cfg in self._config.items()}


def resolve_search_config(config: Any, fields: Iterable[str] | None) -> SearchConfiguration:
    return SearchConfiguration(config, fields)
