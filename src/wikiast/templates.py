"""Template lookup within a syntax tree."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from wikiast.nodes import TemplateNode

if TYPE_CHECKING:
    from wikiast.node import Node


def collect_templates(node: Node, names: Collection[str] = ()) -> list[TemplateNode]:
    """Collect template nodes at or below ``node`` in document order.

    Args:
        node: Node to start from; it is included if it is a matching template.
        names: Decoded template titles to match. Empty matches every template.

    Returns:
        Matching templates, parents before their descendants. Nested templates
        are found even when the enclosing template does not match.
    """
    wanted = frozenset(names)
    return [
        candidate
        for candidate in node.walk()
        if isinstance(candidate, TemplateNode)
        and (not wanted or candidate.title.decoded in wanted)
    ]
