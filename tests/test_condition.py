from esqb.boolean import bool_query
from esqb.condition import when
from esqb.exists import exists
from esqb.query import new_query
from esqb.term import term


def test_when_true_adds_term():
    query = new_query(
        bool_query().filter(
            when(term("language", "en"), True),
            exists("brandId"),
        )
    )
    assert query.to_json() == (
        '{"query":{"bool":{"filter":[{"term":{"language":"en"}},'
        '{"exists":{"field":"brandId"}}]}}}'
    )


def test_when_false_skips_term():
    query = new_query(
        bool_query().filter(
            when(term("language", "en"), False),
            exists("brandId"),
        )
    )
    assert query.to_json() == '{"query":{"bool":{"filter":[{"exists":{"field":"brandId"}}]}}}'


def test_when_returns_same_object_when_true():
    t = term("a", "b")
    assert when(t, True) is t


def test_when_returns_none_when_false():
    assert when(term("a", "b"), False) is None