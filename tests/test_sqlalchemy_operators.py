"""Tests for compiling finder operators into SQLAlchemy expressions."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
    select,
)

from qb_conditions import FilterEvaluator
from qb_conditions.contrib.sqlalchemy import (
    DEFAULT_SQLA_FIND_REGISTRY,
    SQLAlchemyFindOperator,
    SQLAlchemyFindOperatorRegistry,
    build_default_sqla_find_registry,
    build_find_filter,
)
from qb_conditions.exceptions import ConditionParsingError, InvalidOperandShapeError
from qb_conditions.find_operators import (
    FindOperatorType,
    equal,
    ilike,
    in_,
    is_null,
    not_,
)

metadata = MetaData()

person = Table(
    "person",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String),
    Column("city", String, nullable=True),
    Column("score", Integer, nullable=True),
)

ROWS = [
    {"id": 1, "name": "Anna", "city": "athens", "score": 10},
    {"id": 2, "name": "bruno", "city": None, "score": 55},
    {"id": 3, "name": "Carla", "city": "berlin", "score": None},
    {"id": 4, "name": "dimitri", "city": "athens", "score": 90},
]


@pytest.fixture(scope="module")
def engine():
    eng = create_engine("sqlite:///:memory:")
    metadata.create_all(eng)
    with eng.begin() as conn:
        conn.execute(insert(person), ROWS)
    yield eng
    eng.dispose()


def _ids(engine, where: dict[str, Any]) -> list[int]:
    stmt = select(person.c.id).where(build_find_filter(person.c, where))
    with engine.connect() as conn:
        return [row.id for row in conn.execute(stmt.order_by(person.c.id))]


# -- registry ----------------------------------------------------------------


def test_default_registry_covers_native_operators():
    for op_type in FindOperatorType:
        if op_type in (FindOperatorType.NOT, FindOperatorType.RAW):
            continue
        assert DEFAULT_SQLA_FIND_REGISTRY.get(op_type) is not None


def test_unregistered_operator_raises():
    registry = SQLAlchemyFindOperatorRegistry()
    with pytest.raises(ValueError, match="Unsupported operator"):
        registry.apply(equal(1), person.c.id)


def test_custom_operator_replaces_default():
    class CaseFoldEqual(SQLAlchemyFindOperator):
        @property
        def name(self) -> FindOperatorType:
            return FindOperatorType.EQUAL

        def apply(self, column, value):
            return column.ilike(value)

    registry = build_default_sqla_find_registry()
    registry.register(CaseFoldEqual())
    expr = registry.apply(equal("anna"), person.c.name)
    assert "lower(person.name) LIKE lower(:name_1)" == str(expr)


# -- compiled expressions ----------------------------------------------------


def test_is_null_and_negation():
    registry = DEFAULT_SQLA_FIND_REGISTRY
    assert str(registry.apply(is_null(), person.c.city)) == "person.city IS NULL"
    assert (
        str(registry.apply(not_(is_null()), person.c.city))
        == "person.city IS NOT NULL"
    )


def test_raw_operator_uses_column_name(compiler):
    op = compiler.to_find_operator({"$regex": "^A"}, "person.name")
    expr = DEFAULT_SQLA_FIND_REGISTRY.apply(op, person.c.name)
    assert str(expr) == "person.name ~ :p1_regex_person_name"
    assert expr.compile().params == {"p1_regex_person_name": "^A"}


def test_raw_operator_with_explicit_alias(compiler):
    op = compiler.to_find_operator({"$jsonHasKey": "tags"})
    expr = DEFAULT_SQLA_FIND_REGISTRY.apply(op, person.c.name, alias='"p"."meta"')
    assert str(expr) == '"p"."meta" ? :p1_jsonHasKey_field_key'


def test_negated_raw_operator(compiler):
    op = not_(compiler.to_find_operator({"$regexi": "x"}, "n"))
    expr = DEFAULT_SQLA_FIND_REGISTRY.apply(op, person.c.name)
    assert str(expr) == "NOT (person.name ~* :p1_regexi_n)"


def test_double_negation_cancels_out():
    expr = DEFAULT_SQLA_FIND_REGISTRY.apply(not_(not_(is_null())), person.c.city)
    assert str(expr) == "person.city IS NULL"


def test_empty_filter_is_true():
    assert str(build_find_filter(person.c, {})) == "true"


# -- database round trip -----------------------------------------------------


def test_find_filter_with_operator_values(engine):
    assert _ids(engine, {"city": equal("athens"), "score": not_(in_([10]))}) == [4]
    assert _ids(engine, {"name": ilike("%A%")}) == [1, 3]
    assert _ids(engine, {"city": is_null()}) == [2]


@pytest.mark.parametrize(
    "where",
    [
        {"city": "athens"},
        {"score": {"$gte": 55}},
        {"score": {"$between": [0, 60]}},
        {"score": {"$notBetween": [0, 60]}},
        {"city": {"$notEqualTo": "athens"}},
        {"id": [2, 3]},
        {"city": {"$notIn": ["berlin"]}},
        {"name": {"$iContains": "AR"}},
        {"name": {"$notIContains": "a"}},
        {"city": "$isNull"},
        {"score": "$isNotNull", "city": {"$startsWith": "ath"}},
    ],
)
def test_find_filter_matches_in_memory_evaluation(engine, where):
    expected = [row["id"] for row in FilterEvaluator().filter(where, ROWS)]
    assert _ids(engine, where) == expected


def test_bad_condition_names_the_field():
    with pytest.raises(ConditionParsingError) as exc_info:
        build_find_filter(person.c, {"score": {"$between": [1]}})
    assert exc_info.value.field == "score"
    assert isinstance(exc_info.value.cause, InvalidOperandShapeError)
