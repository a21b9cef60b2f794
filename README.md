# esqb

`esqb` builds Elasticsearch request bodies with chained method calls
instead of deeply nested dictionaries. Every builder is a plain `dict`
subclass, so the result can go straight to `json.dumps` or to any
Elasticsearch client. The package has no runtime dependencies.

## Installation

```
pip install esqb
```

To run the test suite, install the test extra and run pytest:

```
pip install "esqb[test]"
pytest
```

## A first query

```python
from esqb.boolean import bool_query
from esqb.enums import Order
from esqb.query import new_query, sort
from esqb.term import term
from esqb.terms import terms

query = new_query(
    bool_query()
    .must(
        bool_query().should(
            term("doc.id", 42),
            term("file.fileId", 42),
        )
    )
    .filter(terms("type", "DOC", "FILE"))
)
query.size(45)
query.sort(sort("name").order(Order.ASC))
query.source().includes("id", "type", "indexedAt", "chapters")

print(query.to_json())
```

This gives:

```json
{"_source":{"includes":["id","type","indexedAt","chapters"]},"query":{"bool":{"filter":[{"terms":{"type":["DOC","FILE"]}}],"must":[{"bool":{"should":[{"term":{"doc.id":42}},{"term":{"file.fileId":42}}]}}]}},"size":45,"sort":[{"name":{"order":"asc"}}]}
```

`Object.to_json()` writes compact JSON with keys in sorted order, and
escapes `<`, `>` and `&` as `\u003c`, `\u003e` and `\u0026`.

## What is available

Query clauses:

- `esqb.boolean.bool_query()` with `must`, `must_not`, `should`, `filter`,
  `minimum_should_match` and `boost`. Bool queries and range queries are
  wrapped under their `"bool"` or `"range"` key when placed into a query,
  a nested query or a clause list (see `esqb.query.correct_type`).
- `esqb.term.term`, `term_if`, `term_func`.
- `esqb.terms.terms`, `terms_array`, `terms_if`, `terms_func`.
- `esqb.exists.exists`, `exists_if`, `exists_func`.
- `esqb.ranges.range_query(field)` with `greater_than`,
  `greater_than_or_equal`, `lesser_than`, `lesser_than_or_equal`, `format`
  and `boost`. Setting `gt` removes `gte` and the other way round; the same
  holds for `lt` and `lte`.
- `esqb.match.match`, `match_none` (each with `operator` and `boost`) and
  `match_all` (with `boost`).
- `esqb.nested.nested(path, query)` with `inner_hits` and `score_mode`.

Conditional clauses: the `*_if` and `*_func` variants return `None` when
the condition is false or the predicate rejects its arguments, and `None`
items are skipped by the bool query's clause methods. `new_query(None)`
gives an empty `"query": {}`. `esqb.condition.when(item, condition)`
returns the item or `None` in the same way for any clause.

Request options on the object returned by `esqb.query.new_query`:
`size`, `from_`, `track_total_hits`, `sort` (taking clauses made with
`esqb.query.sort(field)`, configured with `order` and `mode`), `source`
(returning a source filter with `includes` and `excludes`, which append),
`source_false` and `aggs`.

Aggregations, in `esqb.aggregations`:

```python
from esqb.aggregations import agg_multi_terms, agg_term, agg_terms
from esqb.query import new_query

query = new_query(None).aggs(
    "DocumentIds",
    agg_terms()
    .field("document.id")
    .size(250)
    .aggs(
        "OrderCounts",
        agg_multi_terms().terms(
            agg_term("document.orders.count"),
            agg_term("files.order.count").missing("book.meta.author"),
        ),
    ),
)
```

`agg_terms`, `agg_multi_terms`, `agg_nested`, `agg_max`, `agg_min`,
`agg_avg` and `agg_custom` create aggregations; `field`, `path`, `size`,
`order`, `include`, `exclude`, `terms` and `aggs` configure them.

Enumerations, in `esqb.enums`: `Order`, `Mode`, `ScoreMode` and
`Operator`. Each member is a string and serialises to its Elasticsearch
value, such as `"asc"`, `"median"`, `"sum"` or `"and"`.

## Example command

The package ships a small demonstration that builds a query and passes
its JSON to a stand-in search function, which only echoes it back:

```
esqb-example
```

## What it does not do

`esqb` only builds request bodies. It does not connect to Elasticsearch,
send searches or read responses; pass the built body to a client of your
choice.