"""Tests for abstract finder operator values."""

from __future__ import annotations

import pytest

from qb_conditions.find_operators import (
    FindOperatorType,
    between,
    equal,
    in_,
    is_null,
    not_,
    raw,
)
from qb_conditions.operators import ConditionOperator


def test_not_exposes_child():
    op = not_(in_([1]))
    assert op.type is FindOperatorType.NOT
    assert op.child == in_([1])


def test_child_only_on_not():
    with pytest.raises(TypeError):
        _ = equal(1).child


def test_render_only_on_raw():
    with pytest.raises(TypeError):
        equal(1).render("e.a")


def test_raw_copies_parameters():
    params = {"p1": "x"}
    op = raw("{alias} ~ :p1", params)
    params["p1"] = "changed"
    assert op.parameters == {"p1": "x"}


def test_origin_does_not_affect_equality():
    a = raw("{alias} ~ :p1", {"p1": "x"}, origin=ConditionOperator.REGEX)
    b = raw("{alias} ~ :p1", {"p1": "x"})
    assert a == b


# -- to_dict -----------------------------------------------------------------


def test_to_dict_simple():
    assert between(1, 2).to_dict() == {"type": "between", "value": (1, 2)}


def test_to_dict_nested_not():
    assert not_(is_null()).to_dict() == {
        "type": "not",
        "value": {"type": "isNull"},
    }


def test_to_dict_raw():
    op = raw("{alias} ? :k", {"k": "tags"}, value="tags")
    assert op.to_dict() == {
        "type": "raw",
        "template": "{alias} ? :k",
        "parameters": {"k": "tags"},
    }
