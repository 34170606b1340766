"""Page title and namespace models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wikiast.schemas.language import Language
from wikiast.wiki_util import clean_space, wiki_encode


class Namespace(BaseModel):
    """A MediaWiki namespace."""

    model_config = ConfigDict(frozen=True)

    code: int
    name: str = ""


MAIN_NAMESPACE = Namespace(code=0, name="")
FILE_NAMESPACE = Namespace(code=6, name="File")
TEMPLATE_NAMESPACE = Namespace(code=10, name="Template")
CATEGORY_NAMESPACE = Namespace(code=14, name="Category")


class WikiTitle(BaseModel):
    """Title of a wiki page.

    Attributes:
        decoded: Human readable title without namespace prefix.
        language: Language edition the page belongs to.
        namespace: Namespace of the page.
    """

    model_config = ConfigDict(frozen=True)

    decoded: str = Field(..., min_length=1)
    language: Language
    namespace: Namespace = MAIN_NAMESPACE

    @property
    def encoded(self) -> str:
        """Title as it appears in a page URI, without namespace."""
        return wiki_encode(clean_space(self.decoded))

    @property
    def encoded_with_namespace(self) -> str:
        if not self.namespace.name:
            return self.encoded
        return f"{wiki_encode(self.namespace.name)}:{self.encoded}"

    @property
    def page_iri(self) -> str:
        """Canonical locator of the page on its wiki."""
        return f"{self.language.base_uri}/wiki/{self.encoded_with_namespace}"
