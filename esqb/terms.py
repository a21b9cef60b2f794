"""Terms queries."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

from esqb.query import Array, Object

__all__ = ["TermsQuery", "terms", "terms_array", "terms_func", "terms_if"]

T = TypeVar("T")


class TermsQuery(dict):
    """A ``terms`` query matching any of several values in one field."""


def terms(key: str, *values: Any) -> TermsQuery:
    """Match documents whose ``key`` field holds any of ``values``."""
    return TermsQuery(terms=Object({key: Array(values)}))


def terms_array(key: str, values: Iterable[T]) -> TermsQuery:
    """Like :func:`terms`, taking the values as one iterable."""
    return TermsQuery(terms=Object({key: list(values)}))


def terms_func(
    key: str, values: Sequence[T], predicate: Callable[[str, Sequence[T]], bool]
) -> TermsQuery | None:
    """Return a terms query if ``predicate(key, values)`` is true, else ``None``."""
    if not predicate(key, values):
        return None
    return terms_array(key, values)


def terms_if(key: str, values: Sequence[T], condition: bool) -> TermsQuery | None:
    """Return a terms query if ``condition`` is true, else ``None``."""
    if not condition:
        return None
    return terms_array(key, values)