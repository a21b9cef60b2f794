"""Boolean compound queries."""

from __future__ import annotations

from typing import Any

from esqb.query import Array, correct_type

__all__ = [
    "BoolQuery",
    "FilterClauses",
    "MustClauses",
    "MustNotClauses",
    "ShouldClauses",
    "bool_query",
]


class FilterClauses(Array):
    """Clauses that must match, without taking part in scoring."""


class MustClauses(Array):
    """Clauses that must match and contribute to the score."""


class MustNotClauses(Array):
    """Clauses that must not match."""


class ShouldClauses(Array):
    """Clauses of which some should match."""


class BoolQuery(dict):
    """A ``bool`` query; wrapped as ``{"bool": ...}`` when embedded."""

    wrap_key = "bool"

    def minimum_should_match(self, minimum_should_match: int) -> BoolQuery:
        self["minimum_should_match"] = minimum_should_match
        return self

    def boost(self, boost: float) -> BoolQuery:
        self["boost"] = boost
        return self

    def _append(self, key: str, kind: type[Array], items: tuple[Any, ...]) -> BoolQuery:
        clauses = self.setdefault(key, kind())
        for item in items:
            clause, ok = correct_type(item)
            if ok:
                clauses.append(clause)
        return self

    def filter(self, *items: Any) -> BoolQuery:
        """Append clauses to ``filter``; ``None`` items are skipped."""
        return self._append("filter", FilterClauses, items)

    def must(self, *items: Any) -> BoolQuery:
        """Append clauses to ``must``; ``None`` items are skipped."""
        return self._append("must", MustClauses, items)

    def must_not(self, *items: Any) -> BoolQuery:
        """Append clauses to ``must_not``; ``None`` items are skipped."""
        return self._append("must_not", MustNotClauses, items)

    def should(self, *items: Any) -> BoolQuery:
        """Append clauses to ``should``; ``None`` items are skipped."""
        return self._append("should", ShouldClauses, items)


def bool_query() -> BoolQuery:
    """Create an empty ``bool`` query."""
    return BoolQuery()