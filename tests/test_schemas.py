"""Tests for the language, title and record schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wikiast.schemas import (
    CATEGORY_NAMESPACE,
    MAIN_NAMESPACE,
    TEMPLATE_NAMESPACE,
    Language,
    NodeRecord,
    WikiTitle,
)


class TestLanguage:
    def test_lookup_by_code(self) -> None:
        german = Language.for_code("de")
        assert german.name == "German"
        assert german.base_uri == "http://de.wikipedia.org"

    def test_unknown_code(self) -> None:
        with pytest.raises(ValueError, match="Unknown wiki language code"):
            Language.for_code("xx")

    def test_languages_are_hashable_values(self) -> None:
        assert Language.for_code("en") == Language(wiki_code="en", iso_code="en", name="English")
        assert len({Language.for_code("en"), Language.for_code("en")}) == 1


class TestWikiTitle:
    """Tests for WikiTitle."""

    def test_main_namespace(self) -> None:
        title = WikiTitle(decoded="John Smith", language=Language.for_code("en"))

        assert title.namespace == MAIN_NAMESPACE
        assert title.encoded == "John_Smith"
        assert title.encoded_with_namespace == "John_Smith"
        assert title.page_iri == "http://en.wikipedia.org/wiki/John_Smith"

    def test_template_namespace(self) -> None:
        title = WikiTitle(
            decoded="Infobox person",
            language=Language.for_code("en"),
            namespace=TEMPLATE_NAMESPACE,
        )

        assert title.encoded == "Infobox_person"
        assert title.encoded_with_namespace == "Template:Infobox_person"

    def test_encoded_escapes_unsafe_characters(self) -> None:
        title = WikiTitle(
            decoded="C#  programmers",
            language=Language.for_code("fr"),
            namespace=CATEGORY_NAMESPACE,
        )
        assert title.page_iri == "http://fr.wikipedia.org/wiki/Category:C%23_programmers"

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WikiTitle(decoded="", language=Language.for_code("en"))


class TestNodeRecord:
    def test_negative_line_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NodeRecord(
                id=1,
                revision=1,
                namespace=0,
                language="en",
                line=-1,
                source_iri="http://en.wikipedia.org/wiki/X",
                node_type="TextNode",
            )
