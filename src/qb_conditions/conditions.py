"""
Condition classification.

A raw condition arrives as an arbitrary JSON-like value. ``classify_condition``
decides once which variant it is, so the compiler never has to re-detect
the shape per operator:

- ``OperatorCondition`` — ``{"$gte": 18}``
- ``ArrayCondition``    — ``[1, 2, 3]`` (membership)
- ``SentinelCondition`` — ``"$isNull"`` / ``"$isNotNull"``
- ``LiteralCondition``  — ``"John"``, ``42``, ``True``, ``date(2024, 1, 1)``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from .exceptions import (
    AmbiguousConditionShapeError,
    InvalidConditionShapeError,
    MissingConditionError,
    MissingOperatorValueError,
)
from .operators import ConditionSentinel

_SENTINELS: frozenset[str] = frozenset(s.value for s in ConditionSentinel)


# ---------------------------------------------------------------------------
# Value predicates
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    # bool subclasses int but is never a number here
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_scalar(value: Any) -> bool:
    """String, number or date."""
    return isinstance(value, str) or is_number(value) or is_date(value)


def is_literal(value: Any) -> bool:
    """String, number, boolean or date."""
    return is_scalar(value) or isinstance(value, bool)


def is_scalar_array(value: Any) -> bool:
    return isinstance(value, list | tuple) and all(is_scalar(v) for v in value)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OperatorCondition:
    token: Any
    operand: Any


@dataclass(frozen=True)
class ArrayCondition:
    items: list[Any]


@dataclass(frozen=True)
class SentinelCondition:
    sentinel: ConditionSentinel


@dataclass(frozen=True)
class LiteralCondition:
    value: Any


ClassifiedCondition = (
    OperatorCondition | ArrayCondition | SentinelCondition | LiteralCondition
)


def classify_condition(condition: Any) -> ClassifiedCondition:
    """
    Decide which variant *condition* is.

    Raises:
        MissingConditionError: ``condition`` is ``None``.
        AmbiguousConditionShapeError: a mapping without exactly one key.
        MissingOperatorValueError: the single operator maps to ``None``.
        InvalidConditionShapeError: no variant matches.
    """
    if condition is None:
        raise MissingConditionError

    if isinstance(condition, Mapping):
        keys = list(condition.keys())
        if len(keys) != 1:
            raise AmbiguousConditionShapeError(keys)
        token = keys[0]
        operand = condition[token]
        if operand is None:
            raise MissingOperatorValueError(token)
        return OperatorCondition(token=token, operand=operand)

    if isinstance(condition, list | tuple):
        if not is_scalar_array(condition):
            raise InvalidConditionShapeError(
                condition,
                "Array condition must contain only strings, numbers or dates",
            )
        return ArrayCondition(items=list(condition))

    if isinstance(condition, str) and condition in _SENTINELS:
        return SentinelCondition(sentinel=ConditionSentinel(condition))

    if is_literal(condition):
        return LiteralCondition(value=condition)

    raise InvalidConditionShapeError(condition)
