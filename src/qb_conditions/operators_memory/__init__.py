"""
In-memory operator implementations.

Usage::

    from qb_conditions.operators_memory import build_default_memory_registry

    registry = build_default_memory_registry()
    registry.evaluate(between(1, 10), 5)  # True
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .null import IsNullOperator
from .raw import (
    IRegexOperator,
    JsonContainedOperator,
    JsonContainsOperator,
    JsonEqualsOperator,
    JsonHasKeyOperator,
    NotIRegexOperator,
    NotRegexOperator,
    RegexOperator,
)
from .set import BetweenOperator, InOperator
from .standard import (
    EqualOperator,
    LessThanOperator,
    LessThanOrEqualOperator,
    MoreThanOperator,
    MoreThanOrEqualOperator,
)
from .string import ILikeOperator, LikeOperator


def build_default_memory_registry() -> MemoryOperatorRegistry:
    """Create a registry with every built-in in-memory operator."""
    registry = MemoryOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        MoreThanOperator(),
        MoreThanOrEqualOperator(),
        LessThanOperator(),
        LessThanOrEqualOperator(),
        InOperator(),
        BetweenOperator(),
        LikeOperator(),
        ILikeOperator(),
        IsNullOperator(),
        # raw, keyed by condition token
        RegexOperator(),
        NotRegexOperator(),
        IRegexOperator(),
        NotIRegexOperator(),
        JsonContainsOperator(),
        JsonContainedOperator(),
        JsonEqualsOperator(),
        JsonHasKeyOperator(),
    )
    return registry


__all__ = ["build_default_memory_registry", "MemoryOperatorRegistry"]
