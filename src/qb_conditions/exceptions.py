"""
Condition compilation exception hierarchy.

All exceptions inherit from ``ConditionError``, carry a stable ``code``
and provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ConditionError(Exception):
    """Base exception for all condition compilation errors."""

    code: str = "CONDITION_ERROR"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
        }


class UnsupportedTargetModeError(ConditionError):
    """The requested output encoding is neither ``qb`` nor ``find``."""

    code = "UNSUPPORTED_CONDITION_FOR_VALUE"

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(
            f"Unsupported condition target {target!r}; expected 'qb' or 'find'"
        )


class InvalidFieldReferenceError(ConditionError):
    """Fragment mode needs a non-empty field alias."""

    code = "ALIAS_MUST_BE_A_NON_EMPTY_STRING"

    def __init__(self, field_alias: Any) -> None:
        self.field_alias = field_alias
        super().__init__(
            f"Field alias must be a non-empty string, got {field_alias!r}"
        )


class MissingConditionError(ConditionError):
    code = "CONDITION_CANNOT_BE_UNDEFINED_OR_NULL"

    def __init__(self) -> None:
        super().__init__("Condition cannot be None")


class AmbiguousConditionShapeError(ConditionError):
    """A condition object must hold exactly one operator key."""

    code = "CONDITION_OBJECT_MUST_HAVE_EXACTLY_ONE_KEY"

    def __init__(self, keys: list[Any]) -> None:
        self.keys = keys
        super().__init__(
            f"Condition object must have exactly one key, got {len(keys)}: {keys!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "keys": [str(k) for k in self.keys]}


class MissingOperatorValueError(ConditionError):
    code = "CONDITION_VALUE_CANNOT_BE_UNDEFINED_OR_NULL"

    def __init__(self, operator: Any) -> None:
        self.operator = operator
        super().__init__(f"Value for operator {operator!r} cannot be None")


class UnknownOperatorError(ConditionError):
    """
    Unknown operator token.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    code = "INVALID_CONDITION_OPERATOR"

    def __init__(self, operator: Any, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = (
            get_close_matches(operator, valid_operators, n=3, cutoff=0.6)
            if isinstance(operator, str)
            else []
        )

        message = f"{self.code} {operator}"
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "operator": str(self.operator),
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class InvalidOperandShapeError(ConditionError):
    """An operator received a value of the wrong shape."""

    code = "INVALID_OPERAND_SHAPE"

    def __init__(self, operator: str, expected: str, value: Any = None) -> None:
        self.operator = operator
        self.expected = expected
        self.value = value
        super().__init__(
            f"Operator '{operator}' must have {expected}, "
            f"got {type(value).__name__}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "operator": self.operator,
            "expected": self.expected,
        }


class InvalidConditionShapeError(ConditionError):
    """The condition is none of: operator object, array, sentinel, literal."""

    code = "INVALID_CONDITION"

    def __init__(self, condition: Any, reason: str | None = None) -> None:
        self.condition = condition
        super().__init__(
            reason
            or (
                "Invalid condition: must be an operator object, array, "
                f"string, number, boolean or date, got {type(condition).__name__}"
            )
        )


class ParameterCollisionError(ConditionError):
    """Two clauses tried to bind the same parameter name."""

    code = "PARAMETER_NAME_COLLISION"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Parameter {name!r} is already bound in this clause")


class ConditionParsingError(ConditionError):
    """
    A condition in a filter tree failed to compile.

    ``field`` is the offending field name, ``path`` its location in the
    tree (e.g. ``$or[1].age``). The original error is kept as
    ``__cause__`` and ``cause``.
    """

    code = "QUERY_CONDITION_PARSING_ERROR"

    def __init__(
        self,
        field: str,
        cause: ConditionError,
        path: str | None = None,
    ) -> None:
        self.field = field
        self.path = path or field
        self.cause = cause
        super().__init__(
            f'Error parsing condition for field "{self.path}": {cause.message}'
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "field": self.field,
            "path": self.path,
            "cause": self.cause.to_dict(),
        }
