"""Equality and ordered comparison: equal, moreThan, lessThan and -OrEqual forms."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..find_operators import FindOperatorType


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.EQUAL

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value == condition_value)


class MoreThanOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.MORE_THAN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value > condition_value)


class MoreThanOrEqualOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.MORE_THAN_OR_EQUAL

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value >= condition_value)


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LESS_THAN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value < condition_value)


class LessThanOrEqualOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LESS_THAN_OR_EQUAL

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value <= condition_value)
