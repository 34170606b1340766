"""Test setup for wikiast."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wikiast.nodes import (  # noqa: E402
    PageNode,
    PropertyNode,
    SectionNode,
    TemplateNode,
    TextNode,
)
from wikiast.schemas import TEMPLATE_NAMESPACE, Language, WikiTitle  # noqa: E402


@pytest.fixture
def english() -> Language:
    return Language.for_code("en")


@pytest.fixture
def template_title(english: Language):
    """Factory for template titles in the English wiki."""

    def make(name: str) -> WikiTitle:
        return WikiTitle(decoded=name, language=english, namespace=TEMPLATE_NAMESPACE)

    return make


@pytest.fixture
def page(english: Language, template_title) -> PageNode:
    """A small page assembled bottom-up.

    Layout by line:
        1  intro text
        2  {{Infobox person|name=John Smith|birth_date={{Birth date|1900}}}}
        5  == Early life ==
        6  early life text
        9  == Career ==
        10 {{Cite web|title=Obituary}}
        11 career text
    """
    birth_date = TemplateNode(
        template_title("Birth date"),
        [PropertyNode("1", [TextNode("1900", line=3)], line=3)],
        line=3,
    )
    infobox = TemplateNode(
        template_title("Infobox person"),
        [
            PropertyNode("name", [TextNode("John Smith", line=2)], line=2),
            PropertyNode("birth_date", [birth_date], line=3),
        ],
        line=2,
    )
    cite = TemplateNode(
        template_title("Cite web"),
        [PropertyNode("title", [TextNode("Obituary", line=10)], line=10)],
        line=10,
    )
    return PageNode(
        WikiTitle(decoded="John Smith", language=english),
        page_id=42,
        revision=1234,
        children=[
            TextNode("John Smith was a writer.\n", line=1),
            infobox,
            SectionNode("Early life", 2, [TextNode("Early life", line=5)], line=5),
            TextNode("Smith was born in 1900.\n", line=6),
            SectionNode("Career", 2, [TextNode("Career", line=9)], line=9),
            cite,
            TextNode("He wrote books.\n", line=11),
        ],
    )
