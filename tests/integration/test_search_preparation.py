"""End-to-end: resolve a configuration for an index and tokenize documents and queries."""

from __future__ import annotations

import json
import re

from structlog.testing import capture_logs

from searchprep.keyword_search.tokenizer import Tokenizer
from searchprep.search_config.resolver import SearchConfiguration
from searchprep.utils.text import intersection


def test_config_and_tokens_for_index(known_fields, tokenizer):
    raw = json.dumps(
        {
            "fields": {"title": {"boost": 2, "bool": "AND"}, "body": {"boost": 0}, "tags": {}},
            "expand": True,
        }
    )
    with capture_logs() as logs:
        config = SearchConfiguration(raw, known_fields).get()

    assert list(config) == known_fields
    assert config["title"].boost == 2 and config["title"].bool_model == "AND"
    assert config["body"].boost == 0 and config["body"].expand is True
    assert any(e["event"] == "unknown_search_field" and e["field"] == "tags" for e in logs)

    doc = {"title": "Oracle Database—Internals", "body": "Tuning the buffer-cache, quickly!"}
    postings = {field: tokenizer.tokenize(doc[field]) for field in config}
    assert postings == {
        "title": ["oracle", "database", "internals"],
        "body": ["tuning", "the", "buffer", "cache", "quickly"],
    }

    query_tokens = tokenizer.tokenize("oracle database")
    assert intersection(query_tokens, postings["title"]) == ["oracle", "database"]


def test_separator_switch_round_trip():
    tokenizer = Tokenizer()
    before = tokenizer.tokenize(["Hello, World!", "a-b"])

    tokenizer.set_separator(re.compile(","))
    assert tokenizer.tokenize("a,b c") == ["a", "b c"]

    tokenizer.reset_separator()
    assert tokenizer.tokenize(["Hello, World!", "a-b"]) == before == ["hello", "world", "a", "b"]
