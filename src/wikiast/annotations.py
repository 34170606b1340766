"""Typed keys for per-node annotations."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class AnnotationKey(Generic[T]):
    """Key of a user-defined node annotation.

    The type parameter names the type of value stored under the key. Keys
    compare by identity, so two keys with the same name are distinct.

    Example:
        IGNORED = AnnotationKey[bool]("ignored")
        node.set_annotation(IGNORED, True)
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"AnnotationKey({self.name!r})"
