"""Comparison and equality operators: $gte, $lte, $gt, $lt, $equalTo, $notEqualTo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ..conditions import is_literal, is_scalar
from ..exceptions import InvalidOperandShapeError
from ..find_operators import (
    FindOperator,
    equal,
    less_than,
    less_than_or_equal,
    more_than,
    more_than_or_equal,
    not_,
)
from ..fragment import CompiledFragment
from ..operators import ConditionOperator
from ..strategy import ConditionOperatorStrategy

if TYPE_CHECKING:
    from ..params import BindContext


class _BinaryOperator(ConditionOperatorStrategy):
    """``field <op> :param`` with the operand bound unchanged."""

    sql_operator: ClassVar[str]
    expected: ClassVar[str] = "a number, string or date value"

    def _accepts(self, operand: Any) -> bool:
        return is_scalar(operand)

    def validate(self, operand: Any) -> None:
        if not self._accepts(operand):
            raise InvalidOperandShapeError(self.name.value, self.expected, operand)

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            f"{ctx.field_alias} {self.sql_operator} :{param}", {param: operand}
        )


class GreaterEqualOperator(_BinaryOperator):
    sql_operator = ">="

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.GTE

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return more_than_or_equal(operand)


class LessEqualOperator(_BinaryOperator):
    sql_operator = "<="

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.LTE

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return less_than_or_equal(operand)


class GreaterThanOperator(_BinaryOperator):
    sql_operator = ">"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.GT

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return more_than(operand)


class LessThanOperator(_BinaryOperator):
    sql_operator = "<"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.LT

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return less_than(operand)


class EqualToOperator(_BinaryOperator):
    sql_operator = "="
    expected = "a string, number, boolean or date value"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.EQUAL_TO

    def _accepts(self, operand: Any) -> bool:
        return is_literal(operand)

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return equal(operand)


class NotEqualToOperator(_BinaryOperator):
    sql_operator = "<>"
    expected = "a string, number, boolean or date value"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_EQUAL_TO

    def _accepts(self, operand: Any) -> bool:
        return is_literal(operand)

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return not_(equal(operand))
