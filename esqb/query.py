"""The top-level search body and its generic building blocks."""

from __future__ import annotations

import json
from typing import Any

from esqb.enums import Mode, Order

__all__ = [
    "Object",
    "Array",
    "SourceFilter",
    "SortClause",
    "correct_type",
    "new_query",
    "sort",
]

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class Array(list):
    """A JSON array inside a query body."""


class Object(dict):
    """A JSON object; as returned by :func:`new_query`, a whole search body."""

    def to_json(self) -> str:
        """Serialise compactly with keys in sorted order."""
        text = json.dumps(self, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        return "".join(_JSON_ESCAPES.get(ch, ch) for ch in text)

    def track_total_hits(self, value: bool) -> Object:
        self["track_total_hits"] = value
        return self

    def size(self, size: int) -> Object:
        self["size"] = size
        return self

    def from_(self, offset: int) -> Object:
        self["from"] = offset
        return self

    def source(self) -> SourceFilter:
        """Replace ``_source`` with a fresh filter and return that filter."""
        filt = SourceFilter()
        self["_source"] = filt
        return filt

    def source_false(self) -> Object:
        self["_source"] = False
        return self

    def sort(self, *sorts: SortClause) -> Object:
        self["sort"] = list(sorts)
        return self

    def aggs(self, name: str, agg: Any) -> Object:
        """Add a named aggregation under ``aggs``."""
        self.setdefault("aggs", Object())[name] = agg
        return self


class SourceFilter(dict):
    """The ``_source`` section: fields to include or exclude."""

    def includes(self, *fields: str) -> SourceFilter:
        self.setdefault("includes", Array()).extend(fields)
        return self

    def excludes(self, *fields: str) -> SourceFilter:
        self.setdefault("excludes", Array()).extend(fields)
        return self


class SortClause(dict):
    """One entry of the ``sort`` list, keyed by field name."""

    def _put(self, key: str, value: Any) -> SortClause:
        for settings in self.values():
            if isinstance(settings, dict):
                settings[key] = value
        return self

    def order(self, order: Order) -> SortClause:
        return self._put("order", order)

    def mode(self, mode: Mode) -> SortClause:
        return self._put("mode", mode)


def correct_type(item: Any) -> tuple[Any, bool]:
    """Prepare a clause for embedding in a query.

    ``None`` yields an empty object and ``False``. A clause whose type defines
    a ``wrap_key`` attribute is wrapped as ``{wrap_key: clause}``. Anything
    else is returned unchanged. The flag is ``True`` unless the item was
    ``None``.
    """
    if item is None:
        return Object(), False
    wrap_key = getattr(type(item), "wrap_key", None)
    if wrap_key:
        return Object({wrap_key: item}), True
    return item, True


def new_query(query_clause: Any) -> Object:
    """Create a search body with ``query_clause`` under ``query``."""
    clause, ok = correct_type(query_clause)
    return Object(query=clause if ok else Object())


def sort(field: str) -> SortClause:
    """Start a sort clause on ``field``."""
    return SortClause({field: Object()})