"""Term queries."""

from __future__ import annotations

from typing import Callable, TypeVar

from esqb.query import Object

__all__ = ["TermQuery", "term", "term_func", "term_if"]

T = TypeVar("T")


class TermQuery(dict):
    """A ``term`` query matching one exact value in one field."""


def term(key: str, value: T) -> TermQuery:
    """Match documents whose ``key`` field holds exactly ``value``."""
    return TermQuery(term=Object({key: value}))


def term_func(key: str, value: T, predicate: Callable[[str, T], bool]) -> TermQuery | None:
    """Return a term query if ``predicate(key, value)`` is true, else ``None``."""
    if not predicate(key, value):
        return None
    return term(key, value)


def term_if(key: str, value: T, condition: bool) -> TermQuery | None:
    """Return a term query if ``condition`` is true, else ``None``."""
    if not condition:
        return None
    return term(key, value)