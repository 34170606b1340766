"""wikiast: syntax tree nodes for parsed wiki markup."""

from wikiast.annotations import AnnotationKey
from wikiast.exceptions import InvalidRecordError, TreeStructureError, WikiastError
from wikiast.navigation import find_root, find_section
from wikiast.node import Node
from wikiast.nodes import (
    ExternalLinkNode,
    InternalLinkNode,
    PageNode,
    PropertyNode,
    SectionNode,
    TableCellNode,
    TableNode,
    TableRowNode,
    TemplateNode,
    TextNode,
)
from wikiast.schemas import DefaultEntry, Language, NodeRecord, RecordEntry, WikiTitle
from wikiast.templates import collect_templates
from wikiast.uri_generator import UriGenerator

__all__ = [
    "AnnotationKey",
    "DefaultEntry",
    "ExternalLinkNode",
    "InternalLinkNode",
    "InvalidRecordError",
    "Language",
    "Node",
    "NodeRecord",
    "PageNode",
    "PropertyNode",
    "RecordEntry",
    "SectionNode",
    "TableCellNode",
    "TableNode",
    "TableRowNode",
    "TemplateNode",
    "TextNode",
    "TreeStructureError",
    "UriGenerator",
    "WikiTitle",
    "WikiastError",
    "collect_templates",
    "find_root",
    "find_section",
]
