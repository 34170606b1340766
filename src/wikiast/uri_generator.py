"""Readable, deduplicated URIs for syntax tree nodes."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from wikiast.config import URI_TEXT_MAX_LENGTH
from wikiast.nodes import TableNode, TemplateNode, TextNode
from wikiast.wiki_util import clean_space, remove_wiki_emphasis, wiki_encode

if TYPE_CHECKING:
    from wikiast.node import Node

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<.*?>")
_SENTENCE_PUNCTUATION_RE = re.compile(r"[,!?]")
# Parentheses, line breaks, tabs and the cp1252 curly quotes U+0091/U+0092.
_BLANKS = str.maketrans({char: " " for char in "()\n\r\t\u0091\u0092"})


class UriGenerator:
    """Mint URIs from text content, numbering repeated candidates.

    Each candidate URI gets the suffix ``__1`` the first time it is produced,
    ``__2`` the second time and so on. The counters live as long as the
    generator instance. This class is NOT thread-safe.
    """

    def __init__(self) -> None:
        self.uris: dict[str, int] = {}

    def generate(self, base_uri: str, source: Node | str | None) -> str:
        """Generate a URI below ``base_uri``.

        Args:
            base_uri: URI the generated one extends, usually a page resource.
            source: A node whose text content seeds the URI, the text itself,
                or None to number ``base_uri`` alone.

        Returns:
            ``base_uri + "__" + text + "__" + n``, or ``base_uri + "__" + n``
            when there is no text.
        """
        if source is None or isinstance(source, str):
            text = source or ""
        else:
            text = node_text(source)

        candidate = compose_candidate(base_uri, text) if text else base_uri
        index = self.uris.get(candidate, 0) + 1
        self.uris[candidate] = index
        uri = f"{candidate}__{index}"
        logger.debug("Generated URI %s", uri)
        return uri


def node_text(node: Node | None) -> str:
    """Concatenate the text of a subtree, skipping templates and tables."""
    if node is None:
        return ""
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, (TemplateNode, TableNode)):
        return ""
    return "".join(node_text(child) for child in node.children)


def normalize_text(text: str) -> str:
    """Turn free text into a short, escaped URI fragment."""
    text = remove_wiki_emphasis(text)
    text = text.replace("&nbsp;", " ")
    text = text.translate(_BLANKS)
    text = _TAG_RE.sub("", text)
    text = _SENTENCE_PUNCTUATION_RE.sub("", text)
    text = clean_space(text)
    text = text[:URI_TEXT_MAX_LENGTH]
    return wiki_encode(text)


def compose_candidate(base_uri: str, text: str) -> str:
    """Join ``base_uri`` and normalized ``text`` into an unnumbered URI."""
    text = trim_overlap(base_uri, normalize_text(text))
    if text.startswith("_"):
        text = text[1:]
    return f"{base_uri}__{text}"


def trim_overlap(base_uri: str, text: str) -> str:
    """Drop the prefix of ``text`` that repeats the tail of ``base_uri``.

    The scan starts right after the last '_' or '/' of the base and moves
    left one character at a time while the base tail is shorter than the
    text. The first case-insensitive match wins.
    """
    i = max(base_uri.rfind("_"), base_uri.rfind("/")) + 1
    while i > 0 and len(base_uri) - i < len(text):
        overlap = len(base_uri) - i
        if _equals_ignore_case(base_uri[i:], text[:overlap]):
            return text[overlap:]
        i -= 1
    return text


def _equals_ignore_case(left: str, right: str) -> bool:
    if len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower()
        for a, b in zip(left, right)
    )
