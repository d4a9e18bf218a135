"""Pydantic models for user-supplied search configuration."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)


def _normalize_bool_model(value):
    """Falsy means "not set"; otherwise compare case-insensitively."""
    if not value:
        return None
    if isinstance(value, str):
        return value.strip().upper()
    return value


BoolModel = Annotated[Literal["AND", "OR"] | None, BeforeValidator(_normalize_bool_model)]

# Integers stay integers so the resolved boost matches what the user wrote
Boost = (
    Annotated[StrictInt, Field(ge=0)]
    | Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)]
)


class UserFieldConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    boost: Boost | None = None
    bool_model: BoolModel = Field(default=None, alias="bool")
    expand: bool | None = None


class UserSearchConfig(BaseModel):
    """Validated form of the user's configuration text.

    Every key is optional. ``field_specs`` is None when the user gave no
    ``fields`` map at all, in which case the global values apply to every
    known field. Entries of ``field_specs`` are left raw: only entries for
    fields the index knows are validated, as ``UserFieldConfig``, once the
    known fields are available.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    field_specs: dict[str, Any] | None = Field(default=None, alias="fields")
    bool_model: BoolModel = Field(default=None, alias="bool")
    field_bool: BoolModel = Field(default=None, alias="fieldBool")
    expand: bool | None = None

    @field_validator("expand", mode="before")
    @classmethod
    def _falsy_expand(cls, value):
        return value or None
