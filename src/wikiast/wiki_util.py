"""Wiki markup normalization primitives."""

from __future__ import annotations

import re
from collections.abc import Mapping

from wikiast.config import WIKIAST_HTML_PARSER

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML stripping (pip install beautifulsoup4)."
    ) from exc


_SPACE_RE = re.compile(r"[ _\u00A0\u200E\u200F\u2028\u202A\u202B\u202C\u3000]+")
# A "<" that does not open a tag or a comment is literal text.
_STRAY_LT_RE = re.compile(r"<(?!/?[A-Za-z][\w:-]*(?:\s[^<>]*)?/?>|!--)")


def _percent_escapes(chars: str) -> dict[str, str]:
    return {char: f"%{ord(char):02X}" for char in chars}


# Control characters, the characters RFC 3987 forbids in an ifragment and the
# C1 controls. '?' and '/' are left alone.
FRAGMENT_ESCAPES: dict[str, str] = _percent_escapes(
    "".join(chr(code) for code in range(0x00, 0x20))
    + '"#%<>[\\]^`{|}'
    + "".join(chr(code) for code in range(0x7F, 0xA0))
)
FRAGMENT_ESCAPES[" "] = "_"


def remove_wiki_emphasis(text: str) -> str:
    """Remove bold and italic quote runs.

    Bold-italic runs go first, then bold, then italic, so a run of four
    quotes leaves one literal apostrophe behind.
    """
    return text.replace("'''''", "").replace("'''", "").replace("''", "")


def clean_space(text: str) -> str:
    """Collapse runs of spaces, underscores and exotic blanks into one space and trim."""
    return _SPACE_RE.sub(" ", text).strip()


def escape(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every character that has an entry in ``replacements``."""
    if not any(char in replacements for char in text):
        return text
    return "".join(replacements.get(char, char) for char in text)


def wiki_encode(text: str) -> str:
    """Encode text for use in a URI: spaces become underscores, unsafe characters are percent-escaped."""
    return escape(text, FRAGMENT_ESCAPES)


def strip_html(text: str) -> str:
    """Drop HTML tags and comments and decode entities, keeping the enclosed text.

    A "<" that does not start a tag is kept as a literal character.
    """
    if "<" not in text and "&" not in text:
        return text
    soup = BeautifulSoup(_STRAY_LT_RE.sub("&lt;", text), WIKIAST_HTML_PARSER)
    return soup.get_text()
