"""Match, match_none and match_all queries."""

from __future__ import annotations

from typing import Any

from esqb.enums import Operator
from esqb.query import Object

__all__ = [
    "MatchQuery",
    "MatchNoneQuery",
    "MatchAllQuery",
    "match",
    "match_none",
    "match_all",
]


def _put_in_fields(query: dict, kind: str, key: str, value: Any) -> None:
    """Set ``key`` in the options of every field under ``query[kind]``."""
    fields = query.get(kind)
    if isinstance(fields, dict):
        for options in fields.values():
            if isinstance(options, dict):
                options[key] = value


class MatchQuery(dict):
    """A full-text ``match`` query on one field."""

    def operator(self, operator: Operator) -> MatchQuery:
        """Set how the terms of the query text are combined."""
        _put_in_fields(self, "match", "operator", operator)
        return self

    def boost(self, boost: float) -> MatchQuery:
        """Set the relevance boost."""
        _put_in_fields(self, "match", "boost", boost)
        return self


class MatchNoneQuery(dict):
    """A ``match_none`` query on one field."""

    def operator(self, operator: Operator) -> MatchNoneQuery:
        """Set how the terms of the query text are combined."""
        _put_in_fields(self, "match_none", "operator", operator)
        return self

    def boost(self, boost: float) -> MatchNoneQuery:
        """Set the relevance boost."""
        _put_in_fields(self, "match_none", "boost", boost)
        return self


class MatchAllQuery(dict):
    """A ``match_all`` query."""

    def boost(self, boost: float) -> MatchAllQuery:
        """Set the relevance boost."""
        options = self.get("match_all")
        if isinstance(options, dict):
            options["boost"] = boost
        return self


def match(key: str, query: Any) -> MatchQuery:
    """Match ``query`` against the ``key`` field."""
    return MatchQuery(match=Object({key: Object(query=query)}))


def match_none(key: str, query: Any) -> MatchNoneQuery:
    """Build a ``match_none`` query for ``query`` on the ``key`` field."""
    return MatchNoneQuery(match_none=Object({key: Object(query=query)}))


def match_all() -> MatchAllQuery:
    """Match every document."""
    return MatchAllQuery(match_all=Object())