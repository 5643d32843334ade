"""
Abstract, engine-agnostic operator values.

These are what a declarative finder API consumes: a small vocabulary of
comparison operators, a ``NOT`` wrapper for negation and a ``RAW``
escape hatch carrying its own SQL template and parameters for operators
without a native representation (regular expressions, JSON).

Example::

    not_(in_([1, 2, 3]))
    raw("{alias} ~ :p1_regex_name", {"p1_regex_name": "^J"})
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .operators import ConditionOperator


class FindOperatorType(str, Enum):
    EQUAL = "equal"
    IN = "in"
    MORE_THAN = "moreThan"
    MORE_THAN_OR_EQUAL = "moreThanOrEqual"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    BETWEEN = "between"
    LIKE = "like"
    ILIKE = "ilike"
    IS_NULL = "isNull"
    NOT = "not"
    RAW = "raw"


@dataclass(frozen=True)
class FindOperator:
    """
    A single abstract operator.

    Attributes:
        type: Operator kind.
        value: Operand. For ``BETWEEN`` a ``(low, high)`` tuple, for ``NOT``
            the wrapped child operator, for ``RAW`` the unserialised operand.
        template: ``RAW`` only — SQL text with an ``{alias}`` placeholder.
        parameters: ``RAW`` only — bind parameters used by ``template``.
        origin: ``RAW`` only — the condition token the operator came from.
    """

    type: FindOperatorType
    value: Any = None
    template: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)
    origin: ConditionOperator | None = field(default=None, compare=False)

    @property
    def child(self) -> FindOperator:
        if self.type is not FindOperatorType.NOT:
            raise TypeError(f"{self.type.value} operator has no child")
        return self.value  # type: ignore[no-any-return]

    def render(self, alias: str) -> str:
        """Render a ``RAW`` template for the given column alias."""
        if self.template is None:
            raise TypeError(f"{self.type.value} operator has no raw template")
        return self.template.format(alias=alias)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.type is FindOperatorType.NOT:
            data["value"] = self.child.to_dict()
        elif self.type is FindOperatorType.RAW:
            data["template"] = self.template
            data["parameters"] = dict(self.parameters)
        elif self.type is not FindOperatorType.IS_NULL:
            data["value"] = self.value
        return data


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def equal(value: Any) -> FindOperator:
    return FindOperator(FindOperatorType.EQUAL, value)


def in_(values: list[Any]) -> FindOperator:
    return FindOperator(FindOperatorType.IN, list(values))


def more_than(value: Any) -> FindOperator:
    return FindOperator(FindOperatorType.MORE_THAN, value)


def more_than_or_equal(value: Any) -> FindOperator:
    return FindOperator(FindOperatorType.MORE_THAN_OR_EQUAL, value)


def less_than(value: Any) -> FindOperator:
    return FindOperator(FindOperatorType.LESS_THAN, value)


def less_than_or_equal(value: Any) -> FindOperator:
    return FindOperator(FindOperatorType.LESS_THAN_OR_EQUAL, value)


def between(low: Any, high: Any) -> FindOperator:
    return FindOperator(FindOperatorType.BETWEEN, (low, high))


def like(pattern: str) -> FindOperator:
    return FindOperator(FindOperatorType.LIKE, pattern)


def ilike(pattern: str) -> FindOperator:
    return FindOperator(FindOperatorType.ILIKE, pattern)


def is_null() -> FindOperator:
    return FindOperator(FindOperatorType.IS_NULL)


def not_(operator: FindOperator) -> FindOperator:
    return FindOperator(FindOperatorType.NOT, operator)


def raw(
    template: str,
    parameters: dict[str, Any],
    *,
    value: Any = None,
    origin: ConditionOperator | None = None,
) -> FindOperator:
    return FindOperator(
        FindOperatorType.RAW,
        value,
        template=template,
        parameters=dict(parameters),
        origin=origin,
    )
