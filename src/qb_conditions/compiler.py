"""
Compile a single condition into a query fragment or an abstract operator.

Validation runs once, fail-fast, in this order:

1. the target mode is ``qb`` or ``find``
2. in ``qb`` mode the field alias is a non-empty string
3. the condition is classified (see :mod:`qb_conditions.conditions`)
4. an operator token resolves through the registry
5. the operator validates its operand

Rendering is delegated to one of two sibling renderers, so the
validation path is shared by both encodings.

Example::

    parse_condition("qb", "entity.age", {"$between": [18, 65]})
    # CompiledFragment(
    #     query="entity.age BETWEEN :<id>_between_entity_age_start AND ...",
    #     parameters={"<id>_between_entity_age_start": 18, ...},
    # )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from .conditions import (
    ArrayCondition,
    LiteralCondition,
    OperatorCondition,
    SentinelCondition,
    classify_condition,
)
from .exceptions import InvalidFieldReferenceError, UnsupportedTargetModeError
from .find_operators import FindOperator, is_null, not_
from .fragment import CompiledFragment
from .operators import ConditionOperator, ConditionSentinel, ConditionTarget
from .operators_builtin import DEFAULT_REGISTRY
from .params import BindContext, uuid_id_generator

if TYPE_CHECKING:
    from .params import IdGenerator
    from .strategy import ConditionOperatorRegistry, ConditionOperatorStrategy

logger = logging.getLogger("qb_conditions.compiler")


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


class FragmentRenderer:
    """Renders conditions as ``CompiledFragment`` (query builder mode)."""

    def operator(
        self, strategy: ConditionOperatorStrategy, ctx: BindContext, operand: Any
    ) -> CompiledFragment:
        return strategy.to_fragment(ctx, operand)

    def null_check(self, field_alias: str, *, negated: bool) -> CompiledFragment:
        keyword = "IS NOT NULL" if negated else "IS NULL"
        return CompiledFragment(f"{field_alias} {keyword}", {})


class FindOperatorRenderer:
    """Renders conditions as ``FindOperator`` (finder mode)."""

    def operator(
        self, strategy: ConditionOperatorStrategy, ctx: BindContext, operand: Any
    ) -> FindOperator:
        return strategy.to_find_operator(ctx, operand)

    def null_check(self, field_alias: str, *, negated: bool) -> FindOperator:
        return not_(is_null()) if negated else is_null()


_RENDERERS: dict[ConditionTarget, FragmentRenderer | FindOperatorRenderer] = {
    ConditionTarget.QB: FragmentRenderer(),
    ConditionTarget.FIND: FindOperatorRenderer(),
}


def _resolve_target(target: Any) -> ConditionTarget:
    if isinstance(target, ConditionTarget):
        return target
    if isinstance(target, str):
        try:
            return ConditionTarget(target)
        except ValueError:
            pass
    raise UnsupportedTargetModeError(target)


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------


class ConditionCompiler:
    """
    Validates a condition and renders it for the requested target.

    Args:
        registry: Operator strategies. Defaults to ``DEFAULT_REGISTRY``.
        id_generator: Source of the per-call unique id used in parameter
            names. Defaults to a UUID generator.
    """

    def __init__(
        self,
        registry: ConditionOperatorRegistry | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._registry = registry or DEFAULT_REGISTRY
        self._id_generator = id_generator or uuid_id_generator

    @property
    def registry(self) -> ConditionOperatorRegistry:
        return self._registry

    def compile(
        self,
        target: ConditionTarget | str,
        field_alias: str | None,
        condition: Any,
    ) -> CompiledFragment | FindOperator:
        mode = _resolve_target(target)

        if mode is ConditionTarget.QB and (
            not isinstance(field_alias, str) or not field_alias.strip()
        ):
            raise InvalidFieldReferenceError(field_alias)

        renderer = _RENDERERS[mode]
        classified = classify_condition(condition)

        if isinstance(classified, SentinelCondition):
            return renderer.null_check(
                field_alias if isinstance(field_alias, str) else "",
                negated=classified.sentinel is ConditionSentinel.IS_NOT_NULL,
            )

        if isinstance(classified, OperatorCondition):
            strategy = self._registry.resolve(classified.token)
            operand = classified.operand
        elif isinstance(classified, ArrayCondition):
            strategy = self._registry.resolve(ConditionOperator.IN)
            operand = classified.items
        else:
            strategy = self._registry.resolve(ConditionOperator.EQUAL_TO)
            operand = cast(LiteralCondition, classified).value

        strategy.validate(operand)
        ctx = BindContext.create(
            self._id_generator(), strategy.name.parameter_name, field_alias
        )
        logger.debug(
            "Compiling %s for %r in %s mode",
            strategy.name.value,
            field_alias,
            mode.value,
        )
        return renderer.operator(strategy, ctx, operand)

    def to_fragment(self, field_alias: str, condition: Any) -> CompiledFragment:
        return cast(
            CompiledFragment, self.compile(ConditionTarget.QB, field_alias, condition)
        )

    def to_find_operator(
        self, condition: Any, field_alias: str | None = None
    ) -> FindOperator:
        return cast(
            FindOperator, self.compile(ConditionTarget.FIND, field_alias, condition)
        )


_default_compiler = ConditionCompiler()


def get_default_compiler() -> ConditionCompiler:
    return _default_compiler


def parse_condition(
    target: ConditionTarget | str,
    field_alias: str | None,
    condition: Any,
    *,
    id_generator: IdGenerator | None = None,
) -> CompiledFragment | FindOperator:
    """
    Compile *condition* for *field_alias* into the *target* encoding.

    Raises:
        ConditionError: Any validation failure; see
            :mod:`qb_conditions.exceptions`.
    """
    compiler = (
        ConditionCompiler(id_generator=id_generator)
        if id_generator is not None
        else _default_compiler
    )
    return compiler.compile(target, field_alias, condition)
