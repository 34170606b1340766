"""Wiki language model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from wikiast.config import WIKIAST_WIKI_DOMAIN


class Language(BaseModel):
    """A wiki language edition.

    Attributes:
        wiki_code: Subdomain code of the wiki (e.g., "en", "commons").
        iso_code: ISO 639 code of the language.
        name: English name of the language.
    """

    model_config = ConfigDict(frozen=True)

    wiki_code: str
    iso_code: str
    name: str = ""

    @property
    def base_uri(self) -> str:
        """Base URI of the wiki serving this language."""
        return f"http://{self.wiki_code}.{WIKIAST_WIKI_DOMAIN}"

    @classmethod
    def for_code(cls, wiki_code: str) -> Language:
        """Look up a known language by its wiki code.

        Raises:
            ValueError: If the code is not registered.
        """
        try:
            return _LANGUAGES[wiki_code]
        except KeyError:
            raise ValueError(f"Unknown wiki language code: {wiki_code!r}") from None


NO_LANGUAGE = Language(wiki_code="none", iso_code="none", name="None")

_LANGUAGES: dict[str, Language] = {
    language.wiki_code: language
    for language in (
        Language(wiki_code="en", iso_code="en", name="English"),
        Language(wiki_code="de", iso_code="de", name="German"),
        Language(wiki_code="fr", iso_code="fr", name="French"),
        Language(wiki_code="es", iso_code="es", name="Spanish"),
        Language(wiki_code="nl", iso_code="nl", name="Dutch"),
        Language(wiki_code="commons", iso_code="en", name="Commons"),
    )
}
