"""PostgreSQL regular expression operators: $regex, $notRegex, $regexi, $notRegexi."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import InvalidOperandShapeError
from ..find_operators import FindOperator, raw
from ..fragment import CompiledFragment
from ..operators import ConditionOperator
from ..strategy import ConditionOperatorStrategy

if TYPE_CHECKING:
    from ..params import BindContext


class _RegexOperator(ConditionOperatorStrategy):
    sql_operator: ClassVar[str]

    def validate(self, operand: Any) -> None:
        if not isinstance(operand, str):
            raise InvalidOperandShapeError(self.name.value, "a string value", operand)

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            f"{ctx.field_alias} {self.sql_operator} :{param}", {param: operand}
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        param = ctx.parameter_name()
        return raw(
            f"{{alias}} {self.sql_operator} :{param}",
            {param: operand},
            value=operand,
            origin=self.name,
        )


class RegexOperator(_RegexOperator):
    sql_operator = "~"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.REGEX


class NotRegexOperator(_RegexOperator):
    sql_operator = "!~"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_REGEX


class IRegexOperator(_RegexOperator):
    sql_operator = "~*"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.REGEXI


class NotIRegexOperator(_RegexOperator):
    sql_operator = "!~*"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_REGEXI
