"""
Built-in condition operator strategies and the default registry.

Usage::

    from qb_conditions.operators_builtin import DEFAULT_REGISTRY

    strategy = DEFAULT_REGISTRY.resolve("$gte")
"""

from __future__ import annotations

from ..strategy import ConditionOperatorRegistry
from .jsonb import (
    JsonContainedOperator,
    JsonContainsOperator,
    JsonEqualsOperator,
    JsonHasKeyOperator,
)
from .regex import IRegexOperator, NotIRegexOperator, NotRegexOperator, RegexOperator
from .set import BetweenOperator, InOperator, NotBetweenOperator, NotInOperator
from .standard import (
    EqualToOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualToOperator,
)
from .string import (
    ContainsOperator,
    EndsWithOperator,
    IContainsOperator,
    NotContainsOperator,
    NotEndsWithOperator,
    NotIContainsOperator,
    NotStartsWithOperator,
    StartsWithOperator,
)


def build_default_registry() -> ConditionOperatorRegistry:
    """Create a registry with every built-in condition operator."""
    registry = ConditionOperatorRegistry()
    registry.register_all(
        # Set / range
        InOperator(),
        NotInOperator(),
        BetweenOperator(),
        NotBetweenOperator(),
        # Comparison
        GreaterEqualOperator(),
        LessEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        EqualToOperator(),
        NotEqualToOperator(),
        # Pattern
        ContainsOperator(),
        NotContainsOperator(),
        IContainsOperator(),
        NotIContainsOperator(),
        StartsWithOperator(),
        NotStartsWithOperator(),
        EndsWithOperator(),
        NotEndsWithOperator(),
        # Regex
        RegexOperator(),
        NotRegexOperator(),
        IRegexOperator(),
        NotIRegexOperator(),
        # JSON
        JsonContainsOperator(),
        JsonContainedOperator(),
        JsonEqualsOperator(),
        JsonHasKeyOperator(),
    )
    return registry


DEFAULT_REGISTRY: ConditionOperatorRegistry = build_default_registry()

__all__ = [
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "ConditionOperatorRegistry",
]
