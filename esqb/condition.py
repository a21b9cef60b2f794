"""Conditional inclusion of query clauses."""

from __future__ import annotations

from typing import Optional, TypeVar

__all__ = ["when"]

T = TypeVar("T")


def when(item: T, condition: bool) -> Optional[T]:
    """Return ``item`` if ``condition`` is true, else ``None``.

    ``None`` clauses are skipped by the query builders.
    """
    return item if condition else None