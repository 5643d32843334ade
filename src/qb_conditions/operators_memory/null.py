"""Null check."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..find_operators import FindOperatorType


class IsNullOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.IS_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return field_value is None
