"""Local configuration for wikiast."""

from __future__ import annotations

import os


DEFAULT_WIKI_DOMAIN = "wikipedia.org"
DEFAULT_HTML_PARSER = "lxml"

# Generated URI suffixes are cut to this many characters before escaping.
# Fixed so that the same content yields the same URI everywhere.
URI_TEXT_MAX_LENGTH = 50

WIKIAST_WIKI_DOMAIN = os.getenv("WIKIAST_WIKI_DOMAIN", DEFAULT_WIKI_DOMAIN)
WIKIAST_HTML_PARSER = os.getenv("WIKIAST_HTML_PARSER", DEFAULT_HTML_PARSER)
