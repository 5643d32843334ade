"""Tests for condition classification and value predicates."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from qb_conditions.conditions import (
    ArrayCondition,
    LiteralCondition,
    OperatorCondition,
    SentinelCondition,
    classify_condition,
    is_literal,
    is_number,
    is_scalar,
    is_scalar_array,
)
from qb_conditions.exceptions import (
    AmbiguousConditionShapeError,
    InvalidConditionShapeError,
    MissingConditionError,
    MissingOperatorValueError,
)
from qb_conditions.operators import ConditionSentinel

# -- predicates --------------------------------------------------------------


def test_is_number_excludes_bool():
    assert is_number(1)
    assert is_number(1.5)
    assert is_number(Decimal("2.5"))
    assert not is_number(True)
    assert not is_number("1")


def test_is_scalar():
    assert is_scalar("a")
    assert is_scalar(3)
    assert is_scalar(date(2024, 1, 1))
    assert is_scalar(datetime(2024, 1, 1, 12, 0))
    assert not is_scalar(False)
    assert not is_scalar(None)
    assert not is_scalar([1])


def test_is_literal_includes_bool():
    assert is_literal(True)
    assert is_literal("x")
    assert not is_literal(None)
    assert not is_literal({"a": 1})


def test_is_scalar_array():
    assert is_scalar_array([1, "a", date(2024, 1, 1)])
    assert is_scalar_array(())
    assert not is_scalar_array([1, None])
    assert not is_scalar_array([True])
    assert not is_scalar_array("abc")


# -- classify_condition ------------------------------------------------------


def test_classify_operator_object():
    assert classify_condition({"$gte": 18}) == OperatorCondition("$gte", 18)


def test_classify_unknown_token_is_still_an_operator_object():
    # token resolution happens later, in the registry
    assert classify_condition({"$nope": 1}) == OperatorCondition("$nope", 1)


def test_classify_array():
    assert classify_condition([1, 2, 3]) == ArrayCondition([1, 2, 3])
    assert classify_condition(("a", "b")) == ArrayCondition(["a", "b"])


def test_classify_sentinels():
    assert classify_condition("$isNull") == SentinelCondition(
        ConditionSentinel.IS_NULL
    )
    assert classify_condition("$isNotNull") == SentinelCondition(
        ConditionSentinel.IS_NOT_NULL
    )


@pytest.mark.parametrize(
    "value", ["John", 42, 1.5, True, False, date(2024, 1, 1), "$notASentinel"]
)
def test_classify_literals(value):
    assert classify_condition(value) == LiteralCondition(value)


def test_classify_none_is_missing():
    with pytest.raises(MissingConditionError):
        classify_condition(None)


@pytest.mark.parametrize("condition", [{}, {"$gte": 1, "$lte": 5}])
def test_classify_mapping_needs_exactly_one_key(condition):
    with pytest.raises(AmbiguousConditionShapeError) as exc_info:
        classify_condition(condition)
    assert exc_info.value.keys == list(condition.keys())


def test_classify_operator_without_value():
    with pytest.raises(MissingOperatorValueError) as exc_info:
        classify_condition({"$gte": None})
    assert exc_info.value.operator == "$gte"


def test_classify_array_with_non_scalars():
    with pytest.raises(InvalidConditionShapeError):
        classify_condition([1, {"a": 2}])


@pytest.mark.parametrize("condition", [object(), {1, 2}, b"bytes"])
def test_classify_unsupported_values(condition):
    with pytest.raises(InvalidConditionShapeError):
        classify_condition(condition)
