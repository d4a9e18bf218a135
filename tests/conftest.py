"""Shared test fixtures."""

from __future__ import annotations

import pytest
import structlog

from searchprep.config.settings import Settings
from searchprep.keyword_search.tokenizer import Tokenizer
from searchprep.observability.logger import configure_default_logging


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, token_separator="", search_config="")


@pytest.fixture
def known_fields():
    return ["title", "body"]


@pytest.fixture
def tokenizer():
    return Tokenizer()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    configure_default_logging()
