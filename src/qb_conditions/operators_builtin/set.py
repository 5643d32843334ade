"""Set and range operators: $in, $notIn, $between, $notBetween."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..conditions import is_scalar, is_scalar_array
from ..exceptions import InvalidOperandShapeError
from ..find_operators import FindOperator, between, in_, not_
from ..fragment import CompiledFragment
from ..operators import ConditionOperator
from ..strategy import ConditionOperatorStrategy

if TYPE_CHECKING:
    from ..params import BindContext


class InOperator(ConditionOperatorStrategy):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.IN

    def validate(self, operand: Any) -> None:
        if not is_scalar_array(operand):
            raise InvalidOperandShapeError(
                self.name.value, "an array of strings, numbers or dates", operand
            )

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            f"{ctx.field_alias} IN (:...{param})", {param: list(operand)}
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return in_(operand)


class NotInOperator(InOperator):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_IN

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            f"{ctx.field_alias} NOT IN (:...{param})", {param: list(operand)}
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return not_(in_(operand))


class BetweenOperator(ConditionOperatorStrategy):
    sql_keyword = "BETWEEN"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.BETWEEN

    def validate(self, operand: Any) -> None:
        if not (
            isinstance(operand, list | tuple)
            and len(operand) == 2
            and all(is_scalar(v) for v in operand)
        ):
            raise InvalidOperandShapeError(
                self.name.value,
                "an array with two string, number or date values",
                operand,
            )

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        start = ctx.parameter_name("start")
        end = ctx.parameter_name("end")
        return CompiledFragment(
            f"{ctx.field_alias} {self.sql_keyword} :{start} AND :{end}",
            {start: operand[0], end: operand[1]},
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return between(operand[0], operand[1])


class NotBetweenOperator(BetweenOperator):
    sql_keyword = "NOT BETWEEN"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_BETWEEN

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        return not_(between(operand[0], operand[1]))
