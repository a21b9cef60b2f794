"""A small demonstration of building a search body."""

from __future__ import annotations

import sys
from typing import Sequence

from esqb.boolean import bool_query
from esqb.enums import Order
from esqb.query import Object, new_query, sort
from esqb.term import term
from esqb.terms import terms

__all__ = ["build_query", "mock_get_documents", "main"]


def build_query(doc_id: int) -> Object:
    """Build a search for documents or files with the given id."""
    query = new_query(
        bool_query()
        .must(
            bool_query().should(
                term("doc.id", doc_id),
                term("file.fileId", doc_id),
            )
        )
        .filter(terms("type", "DOC", "FILE"))
    )
    query.size(45)
    query.sort(sort("name").order(Order.ASC))
    query.source().includes("id", "type", "indexedAt", "chapters")
    return query


def mock_get_documents(query: str) -> str:
    """Stand in for a search call by echoing the query."""
    return f"query result for '{query}'"


def main(argv: Sequence[str] | None = None) -> int:
    """Build the demonstration query and print the mock result."""
    del argv
    result = mock_get_documents(build_query(42).to_json())
    sys.stdout.write(f"query result: {result}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())