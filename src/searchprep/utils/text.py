"""Small text helpers shared by the tokenizer and the config resolver."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from searchprep.observability.logger import get_logger

logger = get_logger("searchprep")


def to_string(value: Any) -> str:
    """Return ``""`` for None, otherwise the value's text form."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def intersection(seq_a: Sequence[Any], seq_b: Sequence[Any]) -> list[Any]:
    """Elements of ``seq_a`` that also occur in ``seq_b``, in ``seq_a`` order.

    Duplicates in ``seq_a`` are kept when each one matches.
    """
    if not seq_a or not seq_b:
        return []
    return [item for item in seq_a if item in seq_b]


def warn(event: str, **context: Any) -> None:
    """Emit a non-fatal diagnostic at warning level.

    Goes to stderr unless the application has configured structlog, e.g.
    through ``setup_logging``.
    """
    logger.warning(event, **context)
