"""Root and section lookup for syntax tree nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wikiast.exceptions import TreeStructureError
from wikiast.nodes import PageNode, SectionNode

if TYPE_CHECKING:
    from wikiast.node import Node


def find_root(node: Node) -> PageNode:
    """Follow parent references up to the page node.

    Raises:
        TreeStructureError: If the topmost ancestor is not a ``PageNode``.
    """
    current = node
    while current.parent is not None:
        current = current.parent
    if not isinstance(current, PageNode):
        raise TreeStructureError(
            f"Root of {type(node).__name__} at line {node.line} is a "
            f"{type(current).__name__}, expected PageNode"
        )
    return current


def find_section(node: Node) -> SectionNode | None:
    """Find the last section of the page starting at or before the node's line.

    The page's direct children are assumed to be sorted by line.
    """
    section: SectionNode | None = None
    for child in node.root.children:
        if child.line > node.line:
            return section
        if isinstance(child, SectionNode):
            section = child
    return section
