"""Parse user search configuration into a tagged success/failure result."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from searchprep.models.schemas import UserSearchConfig


@dataclass(frozen=True)
class ParseSuccess:
    config: UserSearchConfig


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseResult = ParseSuccess | ParseFailure


def parse_search_config(raw: Any) -> ParseResult:
    """Turn JSON text, UTF-8 bytes or an already-decoded mapping into a
    validated ``UserSearchConfig``. Never raises."""
    if isinstance(raw, Mapping):
        data: Any = raw
    elif isinstance(raw, (str, bytes, bytearray)):
        if not raw:
            return ParseFailure("empty configuration")
        try:
            data = json.loads(raw)
        except UnicodeDecodeError as e:
            return ParseFailure(f"configuration is not valid UTF-8: {e}")
        except json.JSONDecodeError as e:
            return ParseFailure(f"invalid JSON: {e.msg} at line {e.lineno} column {e.colno}")
    elif raw is None:
        return ParseFailure("no configuration given")
    else:
        return ParseFailure(f"unsupported configuration type {type(raw).__name__}")

    if not isinstance(data, Mapping):
        return ParseFailure(f"top level must be an object, got {type(data).__name__}")

    try:
        return ParseSuccess(UserSearchConfig.model_validate(dict(data)))
    except ValidationError as e:
        return ParseFailure(f"invalid configuration: {format_validation_error(e)}")


def format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )
