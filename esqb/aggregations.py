"""Aggregation clauses."""

from __future__ import annotations

from typing import Any, Mapping

from esqb.enums import Order
from esqb.query import Object

__all__ = [
    "Aggregation",
    "AggTerm",
    "agg_term",
    "agg_terms",
    "agg_multi_terms",
    "agg_nested",
    "agg_max",
    "agg_min",
    "agg_avg",
    "agg_custom",
]


class AggTerm(dict):
    """One source field of a ``multi_terms`` aggregation."""

    def missing(self, missing: str) -> AggTerm:
        """Set the value used for documents that lack the field."""
        self["missing"] = missing
        return self


class Aggregation(dict):
    """An aggregation of the form ``{kind: {...settings}}``."""

    def _put(self, key: str, value: Any) -> Aggregation:
        for settings in self.values():
            if isinstance(settings, dict):
                settings[key] = value
        return self

    def aggs(self, name: str, nested_agg: Aggregation) -> Aggregation:
        """Add a named sub-aggregation under ``aggs``."""
        self.setdefault("aggs", Object())[name] = nested_agg
        return self

    def field(self, field: str) -> Aggregation:
        return self._put("field", field)

    def path(self, path: str) -> Aggregation:
        return self._put("path", path)

    def size(self, size: int) -> Aggregation:
        return self._put("size", size)

    def order(self, field: str, order: Order) -> Aggregation:
        """Sort the buckets by ``field`` in the given direction."""
        return self._put("order", Object({field: order}))

    def include(self, include: str) -> Aggregation:
        return self._put("include", include)

    def exclude(self, exclude: str) -> Aggregation:
        return self._put("exclude", exclude)

    def terms(self, *terms: AggTerm) -> Aggregation:
        """Set the source fields of a ``multi_terms`` aggregation."""
        return self._put("terms", list(terms))


def agg_term(field: str) -> AggTerm:
    """Name a field as a source of a ``multi_terms`` aggregation."""
    return AggTerm(field=field)


def agg_terms() -> Aggregation:
    return Aggregation(terms=Object())


def agg_multi_terms() -> Aggregation:
    return Aggregation(multi_terms=Object())


def agg_nested() -> Aggregation:
    return Aggregation(nested=Object())


def agg_max() -> Aggregation:
    return Aggregation(max=Object())


def agg_min() -> Aggregation:
    return Aggregation(min=Object())


def agg_avg() -> Aggregation:
    return Aggregation(avg=Object())


def agg_custom(agg: Mapping[str, Any] | None) -> Aggregation:
    """Wrap a hand-written aggregation definition."""
    return Aggregation(agg or {})