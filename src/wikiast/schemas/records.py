"""Diagnostic record models attached to syntax tree nodes."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wikiast.schemas.language import Language


class DefaultEntry(BaseModel):
    """Subject of a record written without a node at hand.

    Records carrying this subject are rewrapped with the receiving node as
    their subject when they are attached to a node.
    """

    description: str | None = None


class RecordEntry(BaseModel):
    """A single diagnostic entry.

    Attributes:
        subject: What the entry is about, usually a node or a ``DefaultEntry``.
        language: Language the entry relates to, if known.
        msg: Human readable message.
        error: True if the entry reports a failure.
        level: Severity as a ``logging`` level.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    subject: Any
    language: Language | None = None
    msg: str = ""
    error: bool = False
    level: int = logging.INFO


class NodeRecord(BaseModel):
    """Provenance metadata describing where a node came from."""

    id: int
    revision: int
    namespace: int
    language: str
    line: int = Field(..., ge=0)
    source_iri: str
    section: str | None = None
    node_type: str
