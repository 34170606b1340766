"""Concrete node variants of the wiki syntax tree."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from wikiast.node import Node
from wikiast.schemas import WikiTitle
from wikiast.wiki_util import strip_html


def _wiki_text(nodes: Sequence[Node]) -> str:
    return "".join(node.to_wiki_text() for node in nodes)


def _plain_text(nodes: Sequence[Node]) -> str:
    return "".join(node.to_plain_text() for node in nodes)


class PageNode(Node):
    """Root of the tree, representing one wiki page.

    Attributes:
        title: Title of the page.
        revision: Revision id of the parsed source, -1 if unknown.
        timestamp: Time the revision was saved, if known.
        is_redirect: True if the page is a redirect.
        is_disambiguation: True if the page is a disambiguation page.
    """

    def __init__(
        self,
        title: WikiTitle,
        page_id: int,
        revision: int = -1,
        children: Sequence[Node] = (),
        *,
        timestamp: datetime | None = None,
        is_redirect: bool = False,
        is_disambiguation: bool = False,
    ) -> None:
        super().__init__(children, line=0)
        self.title = title
        self.page_id = page_id
        self.revision = revision
        self.timestamp = timestamp
        self.is_redirect = is_redirect
        self.is_disambiguation = is_disambiguation

    @property
    def id(self) -> int:
        return self.page_id

    def to_wiki_text(self) -> str:
        return _wiki_text(self.children)

    def to_plain_text(self) -> str:
        return _plain_text(self.children)


class SectionNode(Node):
    """A heading; the section runs until the next heading on the page.

    ``children`` hold the parsed heading content, ``name`` its plain text.
    """

    def __init__(self, name: str, level: int, children: Sequence[Node] = (), line: int = 0) -> None:
        if not 1 <= level <= 6:
            raise ValueError(f"Section level must be between 1 and 6, got {level}")
        super().__init__(children, line)
        self.name = name
        self.level = level

    def to_wiki_text(self) -> str:
        marks = "=" * self.level
        heading = _wiki_text(self.children) if self.children else self.name
        return f"{marks}{heading}{marks}"

    def to_plain_text(self) -> str:
        return _plain_text(self.children) if self.children else self.name


class TextNode(Node):
    """A run of plain text."""

    def __init__(self, text: str, line: int = 0) -> None:
        super().__init__((), line)
        self.text = text

    def _retrieve_text(self, recurse: bool) -> str | None:
        return self.text

    def to_wiki_text(self) -> str:
        return self.text

    def to_plain_text(self) -> str:
        return strip_html(self.text)


class PropertyNode(Node):
    """A template argument. Positional arguments have numeric keys."""

    def __init__(self, key: str, children: Sequence[Node] = (), line: int = 0) -> None:
        super().__init__(children, line)
        self.key = key

    @property
    def is_positional(self) -> bool:
        return self.key.isdigit()

    def to_wiki_text(self) -> str:
        value = _wiki_text(self.children)
        return value if self.is_positional else f"{self.key}={value}"

    def to_plain_text(self) -> str:
        return _plain_text(self.children)


class TemplateNode(Node):
    """A template transclusion such as ``{{Infobox person|name=...}}``."""

    def __init__(self, title: WikiTitle, children: Sequence[PropertyNode] = (), line: int = 0) -> None:
        super().__init__(children, line)
        self.title = title

    @property
    def keys(self) -> list[str]:
        return [prop.key for prop in self.children if isinstance(prop, PropertyNode)]

    def get_property(self, key: str) -> PropertyNode | None:
        """The argument with the given key, if present."""
        for prop in self.children:
            if isinstance(prop, PropertyNode) and prop.key == key:
                return prop
        return None

    def to_wiki_text(self) -> str:
        arguments = "".join(f"|{prop.to_wiki_text()}" for prop in self.children)
        return f"{{{{{self.title.decoded}{arguments}}}}}"

    def to_plain_text(self) -> str:
        return ""


class TableCellNode(Node):
    def __init__(self, children: Sequence[Node] = (), line: int = 0, *, header: bool = False) -> None:
        super().__init__(children, line)
        self.header = header

    def to_wiki_text(self) -> str:
        marker = "!" if self.header else "|"
        return f"{marker} {_wiki_text(self.children)}\n"

    def to_plain_text(self) -> str:
        return _plain_text(self.children)


class TableRowNode(Node):
    def to_wiki_text(self) -> str:
        return "|-\n" + _wiki_text(self.children)

    def to_plain_text(self) -> str:
        return " ".join(cell.to_plain_text() for cell in self.children)


class TableNode(Node):
    """A wiki table; children are its rows."""

    def __init__(self, children: Sequence[TableRowNode] = (), line: int = 0, *, caption: str | None = None) -> None:
        super().__init__(children, line)
        self.caption = caption

    def to_wiki_text(self) -> str:
        caption = f"|+ {self.caption}\n" if self.caption else ""
        return f"{{|\n{caption}{_wiki_text(self.children)}|}}"

    def to_plain_text(self) -> str:
        rows = [row.to_plain_text() for row in self.children]
        if self.caption:
            rows.insert(0, self.caption)
        return "\n".join(rows)


class InternalLinkNode(Node):
    """A link to another page of the same wiki; children hold the label."""

    def __init__(self, destination: WikiTitle, children: Sequence[Node] = (), line: int = 0) -> None:
        super().__init__(children, line)
        self.destination = destination

    def to_wiki_text(self) -> str:
        if not self.children:
            return f"[[{self.destination.decoded}]]"
        return f"[[{self.destination.decoded}|{_wiki_text(self.children)}]]"

    def to_plain_text(self) -> str:
        return _plain_text(self.children) if self.children else self.destination.decoded


class ExternalLinkNode(Node):
    """A link to an external URL; children hold the label."""

    def __init__(self, destination: str, children: Sequence[Node] = (), line: int = 0) -> None:
        super().__init__(children, line)
        self.destination = destination

    def to_wiki_text(self) -> str:
        if not self.children:
            return f"[{self.destination}]"
        return f"[{self.destination} {_wiki_text(self.children)}]"

    def to_plain_text(self) -> str:
        return _plain_text(self.children) if self.children else self.destination
