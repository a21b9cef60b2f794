"""Range queries."""

from __future__ import annotations

from typing import Any

from esqb.query import Object

__all__ = ["RangeQuery", "range_query"]


class RangeQuery(dict):
    """A ``range`` query keyed by field; wrapped as ``{"range": ...}``."""

    wrap_key = "range"

    def _set(self, key: str, value: Any, replaces: str | None = None) -> RangeQuery:
        for bounds in self.values():
            if isinstance(bounds, dict):
                bounds[key] = value
                if replaces is not None:
                    bounds.pop(replaces, None)
        return self

    def lesser_than(self, lt: Any) -> RangeQuery:
        """Set ``lt``, dropping any ``lte``."""
        return self._set("lt", lt, "lte")

    def lesser_than_or_equal(self, lte: Any) -> RangeQuery:
        """Set ``lte``, dropping any ``lt``."""
        return self._set("lte", lte, "lt")

    def greater_than(self, gt: Any) -> RangeQuery:
        """Set ``gt``, dropping any ``gte``."""
        return self._set("gt", gt, "gte")

    def greater_than_or_equal(self, gte: Any) -> RangeQuery:
        """Set ``gte``, dropping any ``gt``."""
        return self._set("gte", gte, "gt")

    def format(self, fmt: str) -> RangeQuery:
        return self._set("format", fmt)

    def boost(self, boost: float) -> RangeQuery:
        return self._set("boost", boost)


def range_query(key: str) -> RangeQuery:
    """Start a range query on field ``key``."""
    return RangeQuery({key: Object()})