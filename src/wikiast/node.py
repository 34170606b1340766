"""Base class of all nodes in the wiki syntax tree.

Nodes are NOT thread-safe. A tree is assembled bottom-up: constructing a node
makes it the parent of the children it is given, so children must exist
before their parent. ``root``, ``section``, ``content_hash`` and
``source_iri`` are computed on first access and cached under the assumption
that the tree is no longer mutated.
"""

from __future__ import annotations

import hashlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Collection, Iterator, Sequence
from functools import cached_property
from typing import TYPE_CHECKING, Any, TypeVar

from wikiast.annotations import AnnotationKey
from wikiast.exceptions import InvalidRecordError
from wikiast.schemas import NO_LANGUAGE, DefaultEntry, NodeRecord, RecordEntry

if TYPE_CHECKING:
    from wikiast.nodes import PageNode, SectionNode, TemplateNode
    from wikiast.uri_generator import UriGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")

_HASH_PRIME = 41
# Pseudo ids start at the bottom of the signed 64-bit range.
_PSEUDO_ID_OFFSET = -(2**63) + (2**31 - 1)
_CACHED_NAVIGATION = ("root", "section", "content_hash", "source_iri")


def stable_hash(text: str) -> int:
    """Signed 32-bit hash of a string that is the same in every process."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=4).digest()
    return int.from_bytes(digest, "big", signed=True)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class Node(ABC):
    """A parsed unit of wiki markup.

    Attributes:
        children: Child nodes, owned by this node.
        line: Source line the node starts on.
    """

    def __init__(self, children: Sequence[Node] = (), line: int = 0) -> None:
        if line < 0:
            raise ValueError(f"line must be non-negative, got {line}")
        self.children: list[Node] = list(children)
        self.line = line
        self._parent: Node | None = None
        for child in self.children:
            child._parent = self
        self._annotations: dict[AnnotationKey[Any], Any] = {}
        self._records: list[RecordEntry] | None = None
        self._uri_generator: UriGenerator | None = None

    @abstractmethod
    def to_wiki_text(self) -> str:
        """Convert back to the original (or equivalent) wiki markup."""

    @abstractmethod
    def to_plain_text(self) -> str:
        """Text content of this subtree without markup.

        Templates are not expanded, so template-heavy content comes out
        incomplete.
        """

    @property
    def parent(self) -> Node | None:
        """The node owning this one; None for the page root."""
        return self._parent

    def reparent(self, new_parent: Node | None) -> None:
        """Point the parent reference at ``new_parent``.

        Only the back-reference changes. The caller must move this node
        between the old and new parent's ``children``. Cached navigation
        values are kept as they are.
        """
        cached = [name for name in _CACHED_NAVIGATION if name in self.__dict__]
        if cached:
            logger.warning(
                "Reparenting %s at line %d keeps stale cached %s",
                type(self).__name__,
                self.line,
                ", ".join(cached),
            )
        self._parent = new_parent

    def walk(self) -> Iterator[Node]:
        """Traverse the subtree in pre-order, yielding self first."""
        yield self
        for child in self.children:
            yield from child.walk()

    @cached_property
    def root(self) -> PageNode:
        """The page node at the top of this tree."""
        from wikiast.navigation import find_root

        return find_root(self)

    @cached_property
    def section(self) -> SectionNode | None:
        """The section this node belongs to, if any."""
        from wikiast.navigation import find_section

        return find_section(self)

    def retrieve_text(self) -> str | None:
        """Text of a text node, or of the single text child of this node.

        Returns None for anything else, including deeper single-child chains.
        Prefer ``to_plain_text`` in new code.
        """
        return self._retrieve_text(recurse=True)

    def _retrieve_text(self, recurse: bool) -> str | None:
        if recurse and len(self.children) == 1:
            return self.children[0]._retrieve_text(recurse=False)
        return None

    def get_annotation(self, key: AnnotationKey[T], default: T | None = None) -> T | None:
        """Value stored under ``key``, or ``default`` if the key was never set.

        A key explicitly set to None also returns None; use
        ``has_annotation`` to tell the two apart.
        """
        return self._annotations.get(key, default)

    def has_annotation(self, key: AnnotationKey[Any]) -> bool:
        return key in self._annotations

    def set_annotation(self, key: AnnotationKey[T], value: T) -> None:
        self._annotations[key] = value

    def generate_uri(
        self,
        base_uri: str,
        source: Node | str | None,
        generator: UriGenerator | None = None,
    ) -> str:
        """Generate a deduplicated URI from a node's text or from plain text.

        Without an explicit ``generator`` the node's own generator is used,
        so numbering is only shared between calls on this same node.
        """
        if generator is None:
            if self._uri_generator is None:
                from wikiast.uri_generator import UriGenerator

                self._uri_generator = UriGenerator()
            generator = self._uri_generator
        return generator.generate(base_uri, source)

    @cached_property
    def content_hash(self) -> int:
        """Hash over page revision, line and wiki text.

        Nodes with equal (revision, line, markup) hash the same. Subclasses
        with extra state that is not part of the markup should override this.
        """
        value = stable_hash(str(self.root.revision))
        value = _to_int32(_HASH_PRIME * value + self.line)
        return _to_int32(_HASH_PRIME * value + stable_hash(self.to_wiki_text()))

    @property
    def id(self) -> int:
        """Negative pseudo id derived from ``content_hash``.

        Not guaranteed to be unique. Variants with a natural id override it.
        """
        return _PSEUDO_ID_OFFSET + self.content_hash

    @cached_property
    def source_iri(self) -> str:
        """IRI of the source page, with revision and namespace when known."""
        page = self.root
        iri = page.title.page_iri
        if page.revision >= 0:
            iri += f"?oldid={page.revision}&ns={page.title.namespace.code}"
        return iri

    def contained_template_names(self, names: Collection[str] = ()) -> list[str]:
        """Encoded titles of matching templates in this subtree (all if ``names`` is empty)."""
        return [template.title.encoded for template in self.contained_template_nodes(names)]

    def contained_template_nodes(self, names: Collection[str] = ()) -> list[TemplateNode]:
        """Matching template nodes in this subtree (all if ``names`` is empty)."""
        from wikiast.templates import collect_templates

        return collect_templates(self, names)

    def has_template(self, names: Collection[str] = ()) -> bool:
        return bool(self.contained_template_nodes(names))

    def node_record(self) -> NodeRecord:
        """Provenance metadata of this node."""
        page = self.root
        section = self.section
        return NodeRecord(
            id=self.id,
            revision=page.revision,
            namespace=page.title.namespace.code,
            language=page.title.language.wiki_code,
            line=self.line,
            source_iri=self.source_iri,
            section=section.name if section is not None else None,
            node_type=type(self).__name__,
        )

    @property
    def record_entries(self) -> list[RecordEntry]:
        """Diagnostic entries attached to this node, oldest first."""
        return list(self._records) if self._records is not None else []

    def add_extraction_record(self, entry: RecordEntry | None) -> None:
        """Attach a diagnostic entry to this node.

        Entries about a node are kept as they are. Entries about a
        ``DefaultEntry`` are rewrapped with this node as their subject.
        Entries about anything else are dropped.

        Raises:
            InvalidRecordError: If ``entry`` is None.
        """
        if entry is None:
            raise InvalidRecordError("Record entry must not be None")
        if isinstance(entry.subject, Node):
            record = entry
        elif isinstance(entry.subject, DefaultEntry):
            record = RecordEntry(
                subject=self,
                language=entry.language or NO_LANGUAGE,
                msg=entry.msg,
                error=entry.error,
                level=entry.level,
            )
        else:
            logger.debug(
                "Dropping record entry about %s: %s",
                type(entry.subject).__name__,
                entry.msg,
            )
            return
        if self._records is None:
            self._records = []
        self._records.append(record)

    def __str__(self) -> str:
        return self.to_wiki_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line={self.line}, children={len(self.children)})"
