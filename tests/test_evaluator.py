"""Tests for applying filter trees to in-memory candidates."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from qb_conditions import FilterEvaluator
from qb_conditions.evaluator import resolve_field
from qb_conditions.exceptions import ConditionParsingError, UnknownOperatorError


@dataclass
class Profile:
    age: int | None


@dataclass
class Person:
    name: str
    status: str | None
    profile: Profile | None


PEOPLE = [
    {"name": "John", "status": "active", "age": 30, "tags": {"role": "admin"}},
    {"name": "Jane", "status": "inactive", "age": 40, "tags": {"role": "user"}},
    {"name": "Bob", "status": None, "age": 17, "tags": None},
]


def _names(result):
    return [r["name"] for r in result]


# -- resolve_field -----------------------------------------------------------


def test_resolve_field_on_dicts_and_objects():
    person = Person("John", "active", Profile(30))
    assert resolve_field(person, "profile.age") == 30
    assert resolve_field({"a": {"b": 1}}, "a.b") == 1
    assert resolve_field({"a": None}, "a.b") is None
    assert resolve_field(person, "missing") is None


# -- filtering ---------------------------------------------------------------


def test_empty_tree_matches_everything():
    assert FilterEvaluator().filter({}, PEOPLE) == PEOPLE


def test_flat_tree_is_anded():
    tree = {"status": "active", "age": {"$gte": 18}}
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["John"]


def test_or_group():
    tree = {"$or": [{"name": "Bob"}, {"age": {"$gt": 35}}]}
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["Jane", "Bob"]


def test_keys_inside_or_subtree_are_ored():
    tree = {"$or": [{"name": "Bob", "status": "active"}]}
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["John", "Bob"]


def test_nested_groups():
    tree = {
        "age": {"$lt": 50},
        "$or": [{"status": "$isNull"}, {"$and": [{"name": "Jane"}, {"age": 40}]}],
    }
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["Jane", "Bob"]


def test_empty_or_group_is_ignored():
    tree = {"name": "John", "$or": []}
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["John"]


def test_negation_skips_missing_values():
    tree = {"status": {"$notIn": ["inactive"]}}
    assert _names(FilterEvaluator().filter(tree, PEOPLE)) == ["John"]


def test_sentinels():
    evaluator = FilterEvaluator()
    assert _names(evaluator.filter({"status": "$isNotNull"}, PEOPLE)) == [
        "John",
        "Jane",
    ]
    assert _names(evaluator.filter({"status": "$isNull"}, PEOPLE)) == ["Bob"]


def test_pattern_and_raw_operators():
    evaluator = FilterEvaluator()
    assert _names(evaluator.filter({"name": {"$iContains": "J"}}, PEOPLE)) == [
        "John",
        "Jane",
    ]
    assert _names(evaluator.filter({"name": {"$regex": "n$"}}, PEOPLE)) == ["John"]
    assert _names(
        evaluator.filter({"tags": {"$jsonContains": {"role": "user"}}}, PEOPLE)
    ) == ["Jane"]


def test_objects_with_relations():
    people = [
        Person("John", "active", Profile(30)),
        Person("Ann", "active", None),
    ]
    tree = {"profile.age": {"$between": [18, 65]}}
    assert [p.name for p in FilterEvaluator().filter(tree, people)] == ["John"]


def test_is_satisfied_by():
    evaluator = FilterEvaluator()
    assert evaluator.is_satisfied_by({"age": [30, 40]}, PEOPLE[0]) is True
    assert evaluator.is_satisfied_by({"age": [30, 40]}, PEOPLE[2]) is False


# -- errors ------------------------------------------------------------------


def test_bad_condition_is_wrapped():
    with pytest.raises(ConditionParsingError) as exc_info:
        FilterEvaluator().filter({"age": {"$nope": 1}}, PEOPLE)
    assert exc_info.value.field == "age"
    assert isinstance(exc_info.value.cause, UnknownOperatorError)


def test_logical_value_must_be_a_list():
    with pytest.raises(ConditionParsingError) as exc_info:
        FilterEvaluator().filter({"$and": {"age": 1}}, PEOPLE)
    assert exc_info.value.field == "$and"
