"""Shared defaults and text patterns."""

from __future__ import annotations

# Per-field search defaults
DEFAULT_BOOST = 1
DEFAULT_BOOL = "OR"
DEFAULT_FIELD_BOOL = "OR"
DEFAULT_EXPAND = False

# Whitespace and hyphens
DEFAULT_SEPARATOR_PATTERN = r"[\s\-]+"

# General Punctuation, Supplemental Punctuation, then ASCII punctuation
PUNCTUATION_PATTERN = (
    r"[\u2000-\u206F\u2E00-\u2E7F"
    r"\\'!\"#$%&()*+,\-./:;<=>?@\[\]^_`{|}~]"
)
