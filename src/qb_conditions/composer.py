"""
Compose a filter tree into a ``ClauseSink``.

A filter tree maps field names to conditions; the logical keys ``$and``
and ``$or`` map to lists of nested trees that are applied inside a
bracketed sub-group::

    sink = WhereClauseBuilder()
    apply_where_conditions(
        sink,
        JoinOperator.AND,
        {"name": "John", "$or": [{"age": 30}, {"age": 40}]},
        "entity",
    )
    sink.build().query
    # "entity.name = :… AND (entity.age = :… OR entity.age = :…)"

Keys are applied in their given order. A dotted field name
``relation.field`` addresses the alias of a joined relation instead of
the base alias.

The tree must be a plain JSON-like value without back-references;
recursion depth equals nesting depth and cycles are not detected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .compiler import get_default_compiler
from .exceptions import (
    ConditionError,
    ConditionParsingError,
    InvalidConditionShapeError,
)
from .operators import JoinOperator, LogicalKey
from .sink import WhereClauseBuilder

if TYPE_CHECKING:
    from .compiler import ConditionCompiler
    from .sink import ClauseSink

logger = logging.getLogger("qb_conditions.composer")

_LOGICAL_KEYS: frozenset[str] = frozenset(k.value for k in LogicalKey)


def resolve_field_alias(field: str, base_alias: str) -> str:
    """``name`` -> ``base.name``; ``relation.name`` -> ``relation.name``."""
    if "." in field:
        relation, related_field = field.split(".")[:2]
        return f"{relation}.{related_field}"
    return f"{base_alias}.{field}"


def apply_where_conditions(
    sink: ClauseSink,
    join: JoinOperator | str,
    tree: Mapping[str, Any],
    alias: str,
    *,
    compiler: ConditionCompiler | None = None,
) -> None:
    """
    Recursively apply *tree* to *sink*, joining each entry with *join*.

    The whole tree is compiled before anything reaches *sink*; when any
    condition fails, *sink* is left untouched.

    Raises:
        ConditionParsingError: A condition failed to compile. ``field`` is the
            offending key, ``path`` its position in the tree and the original
            error is chained as ``__cause__``.
    """
    staging = WhereClauseBuilder()
    _apply_tree(
        staging, JoinOperator(join), tree, alias, compiler or get_default_compiler()
    )
    staging.replay(sink)


def _apply_tree(
    sink: ClauseSink,
    join: JoinOperator,
    tree: Mapping[str, Any],
    alias: str,
    compiler: ConditionCompiler,
) -> None:
    if not isinstance(tree, Mapping):
        raise InvalidConditionShapeError(
            tree, f"Filter must be a mapping, got {type(tree).__name__}"
        )

    for field, condition in tree.items():
        try:
            if field in _LOGICAL_KEYS:
                _apply_group(sink, join, LogicalKey(field), condition, alias, compiler)
            else:
                field_alias = resolve_field_alias(field, alias)
                query, parameters = compiler.to_fragment(field_alias, condition)
                sink.where(join, query, parameters)
        except ConditionParsingError as exc:
            # nested failure: keep the innermost field, extend the path
            path = f"{field}{exc.path}" if exc.path.startswith("[") else exc.path
            logger.debug("Failed to parse condition at %s", path)
            raise ConditionParsingError(exc.field, exc.cause, path=path) from exc.cause
        except ConditionError as exc:
            logger.debug("Failed to parse condition for field %r: %s", field, exc)
            raise ConditionParsingError(field, exc) from exc


def _apply_group(
    sink: ClauseSink,
    join: JoinOperator,
    key: LogicalKey,
    subtrees: Any,
    alias: str,
    compiler: ConditionCompiler,
) -> None:
    if not isinstance(subtrees, list | tuple):
        raise InvalidConditionShapeError(
            subtrees, f"'{key.value}' must be a list of filter objects"
        )

    group = sink.group(join)
    for idx, subtree in enumerate(subtrees):
        if not isinstance(subtree, Mapping):
            raise InvalidConditionShapeError(
                subtree,
                f"'{key.value}[{idx}]' must be a filter object, "
                f"got {type(subtree).__name__}",
            )
        try:
            _apply_tree(group, key.join, subtree, alias, compiler)
        except ConditionParsingError as exc:
            raise ConditionParsingError(
                exc.field, exc.cause, path=f"[{idx}].{exc.path}"
            ) from exc.cause


def apply_where_condition(
    sink: ClauseSink,
    alias: str,
    field: str,
    condition: Any,
    join: JoinOperator | str = JoinOperator.AND,
    *,
    compiler: ConditionCompiler | None = None,
) -> None:
    """Apply one ``alias.field`` condition; no relation or logical handling."""
    compiler = compiler or get_default_compiler()
    query, parameters = compiler.to_fragment(f"{alias}.{field}", condition)
    sink.where(JoinOperator(join), query, parameters)


def apply_filters(
    sink: ClauseSink,
    alias: str,
    filters: Mapping[str, Any],
    *,
    compiler: ConditionCompiler | None = None,
) -> None:
    """AND every ``field: condition`` pair of a flat filter onto *sink*."""
    for field, condition in filters.items():
        apply_where_condition(
            sink, alias, field, condition, JoinOperator.AND, compiler=compiler
        )
