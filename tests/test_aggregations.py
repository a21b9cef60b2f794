from esqb.aggregations import (
    AggTerm,
    Aggregation,
    agg_avg,
    agg_custom,
    agg_max,
    agg_min,
    agg_multi_terms,
    agg_nested,
    agg_term,
    agg_terms,
)
from esqb.enums import Order
from esqb.query import Array, Object, new_query


def _json(value):
    return Object(value).to_json()


def test_agg_term_has_field():
    a = agg_term("path")
    assert isinstance(a, AggTerm)
    assert _json(a) == '{"field":"path"}'


def test_missing_adds_missing_field():
    a = agg_term("path").missing("missing_name")
    assert _json(a) == '{"field":"path","missing":"missing_name"}'


def test_agg_terms_json():
    a = agg_terms()
    assert isinstance(a, Aggregation)
    assert _json(a) == '{"terms":{}}'


def test_agg_multi_terms_json():
    assert _json(agg_multi_terms()) == '{"multi_terms":{}}'


def test_agg_nested_json():
    assert _json(agg_nested()) == '{"nested":{}}'


def test_agg_max_json():
    assert _json(agg_max()) == '{"max":{}}'


def test_agg_min_json():
    assert _json(agg_min()) == '{"min":{}}'


def test_agg_avg_json():
    assert _json(agg_avg()) == '{"avg":{}}'


def test_agg_custom_none_is_empty_aggregation():
    a = agg_custom(None)
    assert isinstance(a, Aggregation)
    assert a == {}


def test_agg_custom_json():
    a = agg_custom(Object(custom=Object(my_field=Array([1, 2, 3]))))
    assert _json(a) == '{"custom":{"my_field":[1,2,3]}}'


def test_field():
    assert _json(agg_terms().field("path")) == '{"terms":{"field":"path"}}'


def test_path():
    assert _json(agg_nested().path("review")) == '{"nested":{"path":"review"}}'


def test_size():
    assert _json(agg_terms().size(333)) == '{"terms":{"size":333}}'


def test_order():
    a = agg_terms().order("path", Order.DESC)
    assert _json(a) == '{"terms":{"order":{"path":"desc"}}}'


def test_include():
    assert _json(agg_terms().include("*.2024")) == '{"terms":{"include":"*.2024"}}'


def test_exclude():
    assert _json(agg_terms().exclude("*.2021")) == '{"terms":{"exclude":"*.2021"}}'


def test_terms():
    a = agg_multi_terms().terms(
        agg_term("A1"),
        agg_term("B2").missing("Hell Divers"),
        agg_term("C3"),
        agg_term("D4"),
    )
    assert _json(a) == (
        '{"multi_terms":{"terms":[{"field":"A1"},{"field":"B2","missing":"Hell Divers"},'
        '{"field":"C3"},{"field":"D4"}]}}'
    )


def test_aggs_adds_nested_aggregation():
    a = (
        agg_terms()
        .field("path")
        .size(1_000)
        .order("_key", Order.ASC)
        .include("reduces")
        .aggs(
            "test",
            agg_multi_terms().terms(agg_term("A1").missing("a1"), agg_term("B2")),
        )
    )
    assert _json(a) == (
        '{"aggs":{"test":{"multi_terms":{"terms":[{"field":"A1","missing":"a1"},{"field":"B2"}]}}},'
        '"terms":{"field":"path","include":"reduces","order":{"_key":"asc"},"size":1000}}'
    )


def test_aggs_inside_query():
    query = new_query(None)
    query.aggs("types", agg_terms().field("type").size(100))
    assert query.to_json() == '{"aggs":{"types":{"terms":{"field":"type","size":100}}},"query":{}}'


def test_multiple_aggs_inside_single_query():
    query = (
        new_query(None)
        .aggs("types", agg_terms().field("type").size(100))
        .aggs("average_review_score", agg_avg().field("reviews.score"))
    )
    assert query.to_json() == (
        '{"aggs":{"average_review_score":{"avg":{"field":"reviews.score"}},'
        '"types":{"terms":{"field":"type","size":100}}},"query":{}}'
    )


def test_methods_return_same_object():
    a = agg_terms()
    assert a.field("x") is a
    assert a.aggs("n", agg_max()) is a