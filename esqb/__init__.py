"""Fluent builders for Elasticsearch query DSL request bodies."""

__version__ = "0.2.0"

__all__ = [
    "aggregations",
    "boolean",
    "condition",
    "enums",
    "example",
    "exists",
    "match",
    "nested",
    "query",
    "ranges",
    "term",
    "terms",
]