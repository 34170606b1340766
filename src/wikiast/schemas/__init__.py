"""Shared schemas for wikiast."""

from wikiast.schemas.language import NO_LANGUAGE, Language
from wikiast.schemas.records import DefaultEntry, NodeRecord, RecordEntry
from wikiast.schemas.title import (
    CATEGORY_NAMESPACE,
    FILE_NAMESPACE,
    MAIN_NAMESPACE,
    TEMPLATE_NAMESPACE,
    Namespace,
    WikiTitle,
)

__all__ = [
    "CATEGORY_NAMESPACE",
    "DefaultEntry",
    "FILE_NAMESPACE",
    "Language",
    "MAIN_NAMESPACE",
    "NO_LANGUAGE",
    "Namespace",
    "NodeRecord",
    "RecordEntry",
    "TEMPLATE_NAMESPACE",
    "WikiTitle",
]
