"""Exists queries."""

from __future__ import annotations

from typing import Callable

from esqb.query import Object

__all__ = ["ExistsQuery", "exists", "exists_func", "exists_if"]


class ExistsQuery(dict):
    """An ``exists`` query on one field."""


def exists(key: str) -> ExistsQuery:
    """Match documents that have a value for ``key``."""
    return ExistsQuery(exists=Object(field=key))


def exists_func(key: str, predicate: Callable[[str], bool]) -> ExistsQuery | None:
    """Return an exists query if ``predicate(key)`` is true, else ``None``."""
    if not predicate(key):
        return None
    return exists(key)


def exists_if(key: str, condition: bool) -> ExistsQuery | None:
    """Return an exists query if ``condition`` is true, else ``None``."""
    if not condition:
        return None
    return exists(key)