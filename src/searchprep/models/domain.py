"""Core domain objects handed to the index and scoring collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from searchprep.config.constants import (
    DEFAULT_BOOL,
    DEFAULT_BOOST,
    DEFAULT_EXPAND,
    DEFAULT_FIELD_BOOL,
)


@dataclass
class FieldConfig:
    boost: float = DEFAULT_BOOST
    bool_model: str = DEFAULT_BOOL  # "AND" | "OR", terms within the field
    field_bool: str = DEFAULT_FIELD_BOOL  # "AND" | "OR", across fields
    expand: bool = DEFAULT_EXPAND

    def to_dict(self) -> dict:
        """Wire form using the user-facing key names."""
        return {
            "boost": self.boost,
            "bool": self.bool_model,
            "fieldBool": self.field_bool,
            "expand": self.expand,
        }


# field name -> FieldConfig, keys always equal to the index's known fields
Configuration = dict[str, FieldConfig]
