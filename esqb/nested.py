"""Nested queries."""

from __future__ import annotations

from typing import Any

from esqb.enums import ScoreMode
from esqb.query import Object, new_query

__all__ = ["NestedQuery", "nested"]


class NestedQuery(dict):
    """A ``nested`` query over objects stored at one path."""

    def _put(self, key: str, value: Any) -> NestedQuery:
        body = self.get("nested")
        if isinstance(body, dict):
            body[key] = value
        return self

    def inner_hits(self, inner_hits: Object) -> NestedQuery:
        """Set which matching inner documents are returned."""
        return self._put("inner_hits", inner_hits)

    def score_mode(self, score_mode: ScoreMode) -> NestedQuery:
        """Set how scores of matching nested documents are combined."""
        return self._put("score_mode", score_mode)


def nested(path: str, nested_query: Any) -> NestedQuery:
    """Run ``nested_query`` against the nested objects at ``path``."""
    body = new_query(nested_query)
    body["path"] = path
    return NestedQuery(nested=body)