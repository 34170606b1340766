"""Custom exceptions for wikiast."""


class WikiastError(Exception):
    """Base exception for wikiast operations."""


class TreeStructureError(WikiastError):
    """The syntax tree violates a structural contract."""


class InvalidRecordError(WikiastError, ValueError):
    """A record entry could not be attached to a node."""
