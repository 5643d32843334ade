"""
Operator compilation strategy.

Each condition operator is an isolated ``ConditionOperatorStrategy``
class that knows the operand shape it accepts and how to render itself
in both output encodings. Strategies live in a
``ConditionOperatorRegistry`` keyed by :class:`ConditionOperator`.

New operators are added by subclassing ``ConditionOperatorStrategy``
and registering the instance via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .exceptions import UnknownOperatorError
from .operators import ConditionOperator

if TYPE_CHECKING:
    from .find_operators import FindOperator
    from .fragment import CompiledFragment
    from .params import BindContext


class ConditionOperatorStrategy(ABC):
    """
    Strategy interface for a single condition operator.

    ``validate`` is always called before either renderer, so renderers may
    assume a well-shaped operand.
    """

    @property
    @abstractmethod
    def name(self) -> ConditionOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def validate(self, operand: Any) -> None:
        """
        Check the operand shape.

        Raises:
            InvalidOperandShapeError: If the operand does not fit.
        """
        ...

    @abstractmethod
    def to_fragment(self, ctx: BindContext, operand: Any) -> CompiledFragment:
        """Render as a parameterised query fragment."""
        ...

    @abstractmethod
    def to_find_operator(self, ctx: BindContext, operand: Any) -> FindOperator:
        """Render as an abstract finder operator."""
        ...


class ConditionOperatorRegistry:
    """
    Registry of ``ConditionOperatorStrategy`` instances keyed by
    :class:`ConditionOperator`.
    """

    def __init__(self) -> None:
        self._operators: dict[ConditionOperator, ConditionOperatorStrategy] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: ConditionOperatorStrategy) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: ConditionOperatorStrategy) -> None:
        for op in operators:
            self.register(op)

    def unregister(self, name: ConditionOperator) -> None:
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: ConditionOperator) -> ConditionOperatorStrategy | None:
        return self._operators.get(name)

    def has(self, name: ConditionOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[ConditionOperator]:
        return set(self._operators.keys())

    def resolve(self, token: Any) -> ConditionOperatorStrategy:
        """
        Look up the strategy for a raw token taken from a condition object.

        Raises:
            UnknownOperatorError: If the token is not a registered operator.
        """
        strategy = None
        if isinstance(token, str):
            try:
                strategy = self.get(ConditionOperator(token))
            except ValueError:
                strategy = None
        if strategy is None:
            raise UnknownOperatorError(
                token, [op.value for op in self.supported_operators]
            )
        return strategy
