"""Preview how searchprep resolves a search configuration and tokenizes text.

Usage:
    python scripts/preview_search.py --fields title body \
        --config '{"fields": {"title": {"boost": 2}}, "bool": "AND"}' \
        --text "Hello, World!"

Without --config the SEARCHPREP_SEARCH_CONFIG setting is used, and without
--separator the SEARCHPREP_TOKEN_SEPARATOR setting is used.
"""

from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from searchprep.config.settings import Settings
from searchprep.exceptions import SearchPrepError
from searchprep.keyword_search.tokenizer import Tokenizer
from searchprep.observability.logger import setup_logging
from searchprep.search_config.resolver import SearchConfiguration


def main() -> int:
    parser = argparse.ArgumentParser(description="Preview search configuration and tokenization")
    parser.add_argument("--fields", nargs="+", required=True, help="Known index fields")
    parser.add_argument("--config", default=None, help="Search configuration as JSON text")
    parser.add_argument("--text", nargs="*", default=[], help="Text values to tokenize")
    parser.add_argument("--separator", default=None, help="Custom token separator regex")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings.log_level, settings.log_json)

    try:
        tokenizer = Tokenizer.from_settings(settings)
        if args.separator:
            tokenizer.set_separator(re.compile(args.separator))
        if args.config is None:
            search_config = SearchConfiguration.from_settings(settings, args.fields)
        else:
            search_config = SearchConfiguration(args.config, args.fields)
    except (SearchPrepError, re.error) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    output = {
        "config": search_config.to_dict(),
        "tokens": tokenizer.tokenize(args.text),
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
