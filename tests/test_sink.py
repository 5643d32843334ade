"""Tests for the in-memory WHERE clause builder."""

from __future__ import annotations

import pytest

from qb_conditions import ClauseSink, JoinOperator, WhereClauseBuilder
from qb_conditions.exceptions import ParameterCollisionError


def test_builder_is_a_clause_sink():
    assert isinstance(WhereClauseBuilder(), ClauseSink)


def test_empty_builder():
    builder = WhereClauseBuilder()
    assert builder.is_empty()
    assert builder.build().query == ""
    assert builder.build().parameters == {}


def test_first_join_is_dropped():
    builder = WhereClauseBuilder()
    builder.where(JoinOperator.OR, "a = :p1", {"p1": 1})
    builder.where(JoinOperator.AND, "b = :p2", {"p2": 2})
    assert builder.render() == "a = :p1 AND b = :p2"


def test_sequential_joins():
    builder = WhereClauseBuilder()
    builder.where(JoinOperator.AND, "a")
    builder.where(JoinOperator.OR, "b")
    builder.where(JoinOperator.AND, "c")
    assert builder.render() == "a OR b AND c"


def test_groups_are_bracketed_and_share_parameters():
    builder = WhereClauseBuilder()
    builder.where(JoinOperator.AND, "e.name = :p1", {"p1": "John"})
    group = builder.group(JoinOperator.AND)
    group.where(JoinOperator.OR, "e.age = :p2", {"p2": 30})
    group.where(JoinOperator.OR, "e.age = :p3", {"p3": 40})

    fragment = builder.build()
    assert fragment.query == "e.name = :p1 AND (e.age = :p2 OR e.age = :p3)"
    assert fragment.parameters == {"p1": "John", "p2": 30, "p3": 40}
    assert group.parameters == fragment.parameters


def test_empty_groups_are_skipped():
    builder = WhereClauseBuilder()
    builder.group(JoinOperator.AND)
    builder.where(JoinOperator.OR, "a")
    builder.group(JoinOperator.OR).group(JoinOperator.AND)
    assert builder.render() == "a"


def test_leading_group():
    builder = WhereClauseBuilder()
    group = builder.group(JoinOperator.OR)
    group.where(JoinOperator.OR, "a")
    group.where(JoinOperator.OR, "b")
    builder.where(JoinOperator.AND, "c")
    assert builder.render() == "(a OR b) AND c"


def test_accepts_join_strings():
    builder = WhereClauseBuilder()
    builder.where("AND", "a")
    builder.where("OR", "b")
    assert builder.render() == "a OR b"


def test_parameter_collision_is_rejected():
    builder = WhereClauseBuilder()
    builder.where(JoinOperator.AND, "a = :p1", {"p1": 1})
    group = builder.group(JoinOperator.AND)

    with pytest.raises(ParameterCollisionError) as exc_info:
        group.where(JoinOperator.AND, "b = :p2 AND c = :p1", {"p2": 2, "p1": 3})

    assert exc_info.value.name == "p1"
    # nothing from the rejected clause was bound
    assert builder.parameters == {"p1": 1}
    assert builder.render() == "a = :p1"


def test_replay_copies_clauses_and_groups():
    source = WhereClauseBuilder()
    source.where(JoinOperator.AND, "a = :p1", {"p1": 1})
    group = source.group(JoinOperator.AND)
    group.where(JoinOperator.OR, "b = :p2", {"p2": 2})
    group.where(JoinOperator.OR, "c = :p3", {"p3": 3})

    target = WhereClauseBuilder()
    target.where(JoinOperator.AND, "z = :p0", {"p0": 0})
    source.replay(target)

    fragment = target.build()
    assert fragment.query == "z = :p0 AND a = :p1 AND (b = :p2 OR c = :p3)"
    assert fragment.parameters == {"p0": 0, "p1": 1, "p2": 2, "p3": 3}
