"""JSON operators: $jsonContains, $jsonContained, $jsonEquals, $jsonHasKey.

The fragments use PostgreSQL jsonb operators (``@>``, ``<@``, ``?``).
Structured operands are bound as their JSON text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import InvalidOperandShapeError
from ..find_operators import FindOperator, raw
from ..fragment import CompiledFragment
from ..operators import ConditionOperator
from ..strategy import ConditionOperatorStrategy

if TYPE_CHECKING:
    from ..params import BindContext


def _dumps(operand: Any) -> str:
    # NaN and Infinity have no JSON representation
    return json.dumps(operand, allow_nan=False)


class _JsonDocumentOperator(ConditionOperatorStrategy):
    sql_operator: ClassVar[str]

    def validate(self, operand: Any) -> None:
        try:
            _dumps(operand)
        except (TypeError, ValueError) as exc:
            raise InvalidOperandShapeError(
                self.name.value, "a JSON-serializable value", operand
            ) from exc

    def _template(self, param: str) -> str:
        return f"{{alias}} {self.sql_operator} :{param}"

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name()
        return CompiledFragment(
            self._template(param).format(alias=ctx.field_alias),
            {param: _dumps(operand)},
        )

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        param = ctx.parameter_name()
        return raw(
            self._template(param),
            {param: _dumps(operand)},
            value=operand,
            origin=self.name,
        )


class JsonContainsOperator(_JsonDocumentOperator):
    """``field @> value``"""

    sql_operator = "@>"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_CONTAINS


class JsonContainedOperator(_JsonDocumentOperator):
    """``field <@ value``"""

    sql_operator = "<@"

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_CONTAINED


class JsonEqualsOperator(_JsonDocumentOperator):
    """``field = value``"""

    sql_operator = "="

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_EQUALS


class JsonHasKeyOperator(ConditionOperatorStrategy):
    """``field ? key``"""

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_HAS_KEY

    def validate(self, operand: Any) -> None:
        if not isinstance(operand, str):
            raise InvalidOperandShapeError(self.name.value, "a string key", operand)

    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        param = ctx.parameter_name("key")
        return CompiledFragment(f"{ctx.field_alias} ? :{param}", {param: operand})

    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        param = ctx.parameter_name("key")
        return raw(
            f"{{alias}} ? :{param}", {param: operand}, value=operand, origin=self.name
        )
