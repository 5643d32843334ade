"""Set and range operators: in, between."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..find_operators import FindOperatorType


class InOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return field_value in condition_value


class BetweenOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.BETWEEN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = condition_value
        return bool(low <= field_value <= high)
