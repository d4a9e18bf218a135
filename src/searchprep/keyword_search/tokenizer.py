"""Text preprocessing for keyword search: lowercase, strip punctuation, split."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchprep.config.constants import DEFAULT_SEPARATOR_PATTERN, PUNCTUATION_PATTERN
from searchprep.config.settings import Settings
from searchprep.exceptions import ConfigurationError
from searchprep.utils.text import to_string

_PUNCTUATION_RE = re.compile(PUNCTUATION_PATTERN)


@dataclass(frozen=True)
class Separator:
    """Token boundary pattern.

    Only the built-in default has ``is_default`` set, and only the default
    enables punctuation stripping. A custom separator compiled from the same
    regex text is still custom.
    """

    pattern: re.Pattern[str]
    is_default: bool = False

    def split(self, text: str) -> list[str]:
        # re.split yields None for unmatched groups in patterns with captures
        return [piece for piece in self.pattern.split(text) if piece]


DEFAULT_SEPARATOR = Separator(re.compile(DEFAULT_SEPARATOR_PATTERN), is_default=True)


def tokenize(value: Any, separator: Separator = DEFAULT_SEPARATOR) -> list[str]:
    """Tokenize a value or a list/tuple of values.

    None entries are skipped, everything else goes through ``to_string`` and
    is lowercased. Punctuation is replaced by spaces only under the default
    separator. Tokens keep input order.
    """
    if value is None:
        return []

    items: Iterable[Any] = value if isinstance(value, (list, tuple)) else (value,)
    strip_punctuation = separator.is_default

    tokens: list[str] = []
    for item in items:
        if item is None:
            continue
        text = to_string(item).lower()
        if strip_punctuation:
            text = _PUNCTUATION_RE.sub(" ", text)
        tokens.extend(separator.split(text))
    return tokens


class Tokenizer:
    """Owns a separator that can be swapped and restored between calls."""

    def __init__(self, separator: Separator | re.Pattern[str] | None = None) -> None:
        self._separator = DEFAULT_SEPARATOR
        if separator is not None:
            self.set_separator(separator)

    @classmethod
    def from_settings(cls, settings: Settings) -> Tokenizer:
        if not settings.token_separator:
            return cls()
        try:
            pattern = re.compile(settings.token_separator)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid token separator {settings.token_separator!r}: {e}"
            ) from e
        return cls(pattern)

    def tokenize(self, value: Any) -> list[str]:
        return tokenize(value, self._separator)

    def set_separator(self, separator: Separator | re.Pattern[str]) -> None:
        """Replace the active separator. Anything that is not a compiled
        pattern or a Separator is ignored and the current one stays."""
        if isinstance(separator, Separator):
            self._separator = separator
        elif isinstance(separator, re.Pattern):
            self._separator = Separator(separator)

    def reset_separator(self) -> None:
        self._separator = DEFAULT_SEPARATOR

    def get_separator(self) -> Separator:
        return self._separator
