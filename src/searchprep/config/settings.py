"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Tokenizer
    token_separator: str = ""  # regex; empty means the built-in default

    # Search configuration
    search_config: str = ""  # raw JSON; empty means defaults for every field

    model_config = {"env_file": ".env", "env_prefix": "SEARCHPREP_"}
