"""
In-memory evaluation of abstract operators and filter trees.

Provides the ``MemoryOperator`` strategy interface, a registry mapping
``FindOperatorType`` (and, for ``RAW`` operators, the originating
``ConditionOperator``) to evaluation strategies, and ``FilterEvaluator``
which applies a whole filter tree to a candidate dict or object.

Comparisons against a missing (``None``) field value are false, as they
are in SQL, including under negation: ``$notIn`` does not select rows
whose field is NULL.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .compiler import get_default_compiler
from .exceptions import (
    ConditionError,
    ConditionParsingError,
    InvalidConditionShapeError,
)
from .find_operators import FindOperatorType
from .operators import JoinOperator, LogicalKey

if TYPE_CHECKING:
    from .compiler import ConditionCompiler
    from .find_operators import FindOperator
    from .operators import ConditionOperator

_LOGICAL_KEYS: frozenset[str] = frozenset(k.value for k in LogicalKey)


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> FindOperatorType:
        """The operator type this strategy handles."""
        ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The actual value resolved from the candidate object.
            condition_value: The operand carried by the ``FindOperator``.
        """
        ...


class RawMemoryOperator(ABC):
    """Evaluates a ``RAW`` operator, selected by its originating token."""

    @property
    @abstractmethod
    def name(self) -> ConditionOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool: ...


class MemoryOperatorRegistry:
    """
    Registry of memory strategies.

    Usage::

        registry = build_default_memory_registry()
        registry.evaluate(not_(in_([1, 2])), 3)  # True
    """

    def __init__(self) -> None:
        self._operators: dict[FindOperatorType, MemoryOperator] = {}
        self._raw_operators: dict[ConditionOperator, RawMemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator | RawMemoryOperator) -> None:
        if isinstance(operator, RawMemoryOperator):
            self._raw_operators[operator.name] = operator
        else:
            self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator | RawMemoryOperator) -> None:
        for op in operators:
            self.register(op)

    # -- look-up -------------------------------------------------------------

    def get(self, name: FindOperatorType) -> MemoryOperator | None:
        return self._operators.get(name)

    def get_raw(self, name: ConditionOperator) -> RawMemoryOperator | None:
        return self._raw_operators.get(name)

    # -- evaluation ----------------------------------------------------------

    def evaluate(self, operator: FindOperator, field_value: Any) -> bool:
        """
        Evaluate *operator* against *field_value*.

        Raises:
            ValueError: If no strategy is registered for the operator.
        """
        if operator.type is FindOperatorType.NOT:
            child = operator.child
            if field_value is None and child.type is not FindOperatorType.IS_NULL:
                return False
            return not self.evaluate(child, field_value)

        if operator.type is FindOperatorType.RAW:
            raw_op = self.get_raw(operator.origin) if operator.origin else None
            if raw_op is None:
                raise ValueError(
                    f"Unsupported raw operator for in-memory evaluation: "
                    f"{operator.origin}"
                )
            return raw_op.evaluate(field_value, operator.value)

        op = self.get(operator.type)
        if op is None:
            raise ValueError(
                f"Unsupported operator for in-memory evaluation: {operator.type}"
            )
        return op.evaluate(field_value, operator.value)


def resolve_field(obj: Any, field_path: str) -> Any:
    """Resolve ``relation.field`` on nested dicts or attributes."""
    for part in field_path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, Mapping) else getattr(obj, part, None)
    return obj


class FilterEvaluator:
    """
    Apply a filter tree to in-memory candidates.

    Conditions are compiled in ``find`` mode and joined exactly as
    :func:`qb_conditions.composer.apply_where_conditions` joins them into
    a SQL clause, so a tree selects the same candidates in memory as it
    selects rows in the database.
    """

    def __init__(
        self,
        registry: MemoryOperatorRegistry | None = None,
        compiler: ConditionCompiler | None = None,
    ) -> None:
        if registry is None:
            from .operators_memory import build_default_memory_registry

            registry = build_default_memory_registry()
        self._registry = registry
        self._compiler = compiler or get_default_compiler()

    def is_satisfied_by(self, tree: Mapping[str, Any], candidate: Any) -> bool:
        result = self._evaluate(tree, candidate, JoinOperator.AND)
        return True if result is None else result

    def filter(self, tree: Mapping[str, Any], candidates: list[Any]) -> list[Any]:
        return [c for c in candidates if self.is_satisfied_by(tree, c)]

    def _evaluate(
        self, tree: Mapping[str, Any], candidate: Any, join: JoinOperator
    ) -> bool | None:
        if not isinstance(tree, Mapping):
            raise InvalidConditionShapeError(
                tree, f"Filter must be a mapping, got {type(tree).__name__}"
            )
        result: bool | None = None
        for field, condition in tree.items():
            if field in _LOGICAL_KEYS:
                value = self._evaluate_group(LogicalKey(field), condition, candidate)
                if value is None:
                    continue
            else:
                try:
                    operator = self._compiler.to_find_operator(condition, field)
                except ConditionError as exc:
                    raise ConditionParsingError(field, exc) from exc
                value = self._registry.evaluate(
                    operator, resolve_field(candidate, field)
                )
            result = value if result is None else _join(join, result, value)
        return result

    def _evaluate_group(
        self, key: LogicalKey, subtrees: Any, candidate: Any
    ) -> bool | None:
        if not isinstance(subtrees, list | tuple):
            raise ConditionParsingError(
                key.value,
                InvalidConditionShapeError(
                    subtrees, f"'{key.value}' must be a list of filter objects"
                ),
            )
        result: bool | None = None
        for subtree in subtrees:
            value = self._evaluate(subtree, candidate, key.join)
            if value is None:
                continue
            result = value if result is None else _join(key.join, result, value)
        return result


def _join(join: JoinOperator, left: bool, right: bool) -> bool:
    return (left and right) if join is JoinOperator.AND else (left or right)
