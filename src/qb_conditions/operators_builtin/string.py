"""Pattern operators: $contains, $iContains, $startsWith, $endsWith and negations.

The operand is wrapped in ``%`` as-is; ``%`` and ``_`` inside the operand
keep their LIKE meaning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import InvalidOperandShapeError
from ..find_operators import FindOperator, ilike, like, not_
from ..fragment import CompiledFragment
from ..operators import ConditionOperator
from ..strategy import ConditionOperatorStrategy

if TYPE_CHECKING:
    from ..params import BindContext


class _PatternOperator(ConditionOperatorStrategy):
    pattern: ClassVar[str]
    case_insensitive: ClassVar[bool] = False
    negated: ClassVar[bool] = False

    def validate(self, operand: Any) -> None:
        if not isinstance(operand, str):
            raise InvalidOperandShapeError(self.name.value, "a string value", operand)

    @property
    def sql_keyword(self) -> str:
        keyword = "ILIKE" if self.case_insensitive else "LIKE"
        return f"NOT {keyword}" if self.negated else keyword

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            f"{ctx.field_alias} {self.sql_keyword} :{param}",
            {param: self.pattern.format(operand)},
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        factory = ilike if self.case_insensitive else like
        op = factory(self.pattern.format(operand))
        return not_(op) if self.negated else op


class ContainsOperator(_PatternOperator):
    pattern = "%{}%"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.CONTAINS


class NotContainsOperator(_PatternOperator):
    pattern = "%{}%"
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_CONTAINS


class IContainsOperator(_PatternOperator):
    pattern = "%{}%"
    case_insensitive = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.ICONTAINS


class NotIContainsOperator(_PatternOperator):
    pattern = "%{}%"
    case_insensitive = True
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_ICONTAINS


class StartsWithOperator(_PatternOperator):
    pattern = "{}%"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.STARTS_WITH


class NotStartsWithOperator(_PatternOperator):
    pattern = "{}%"
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_STARTS_WITH


class EndsWithOperator(_PatternOperator):
    pattern = "%{}"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.ENDS_WITH


class NotEndsWithOperator(_PatternOperator):
    pattern = "%{}"
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_ENDS_WITH
