"""
Attach compiled fragments to SQLAlchemy statements.

``SQLAlchemyClauseSink`` receives fragments from the composer and turns
each into a ``text()`` clause with bound parameters; ``:...name``
placeholders become expanding bind parameters so list values render as
``IN (...)``. Clauses are combined with ``and_``/``or_`` under SQL
precedence, so the expression selects the same rows as the text a
``WhereClauseBuilder`` renders for the same calls.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, bindparam, literal_column, or_, text

from ...composer import apply_where_conditions
from ...operators import JoinOperator
from ...sorting import SortDirection, parse_sort_order

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement, Select, TextClause

    from ...compiler import ConditionCompiler

_EXPANDING_PLACEHOLDER = re.compile(r":\.\.\.(\w+)")
# expanding bind parameters render their own parentheses
_BRACKETED_EXPANDING_PLACEHOLDER = re.compile(r"\(\s*:\.\.\.(\w+)\s*\)")


def fragment_to_clause(
    query: str, parameters: Mapping[str, Any] | None = None
) -> TextClause:
    """Build a ``text()`` clause from a fragment and its parameters."""
    expanding = set(_EXPANDING_PLACEHOLDER.findall(query))
    sql = _BRACKETED_EXPANDING_PLACEHOLDER.sub(r":\1", query)
    clause = text(_EXPANDING_PLACEHOLDER.sub(r":\1", sql))
    if parameters:
        clause = clause.bindparams(
            *(
                bindparam(name, value, expanding=name in expanding)
                for name, value in parameters.items()
            )
        )
    return clause


class SQLAlchemyClauseSink:
    """``ClauseSink`` accumulating a SQLAlchemy boolean expression."""

    def __init__(self) -> None:
        self._items: list[tuple[JoinOperator, TextClause | SQLAlchemyClauseSink]] = []

    def where(
        self,
        join: JoinOperator,
        query: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        self._items.append((JoinOperator(join), fragment_to_clause(query, parameters)))

    def group(self, join: JoinOperator) -> SQLAlchemyClauseSink:
        child = SQLAlchemyClauseSink()
        self._items.append((JoinOperator(join), child))
        return child

    def build(self) -> ColumnElement[bool] | None:
        """
        Return the combined expression, or ``None`` when nothing was added.

        AND binds tighter than OR, as in the rendered SQL text: runs of
        AND-joined clauses are grouped first and the runs are then ORed.
        """
        runs: list[list[Any]] = []
        for join, item in self._items:
            clause = item.build() if isinstance(item, SQLAlchemyClauseSink) else item
            if clause is None:
                continue
            if runs and join is JoinOperator.AND:
                runs[-1].append(clause)
            else:
                runs.append([clause])
        if not runs:
            return None
        terms = [run[0] if len(run) == 1 else and_(*run) for run in runs]
        if len(terms) == 1:
            return terms[0]  # type: ignore[no-any-return]
        return or_(*terms)


def apply_where_conditions_to_select(
    stmt: Select[Any],
    tree: Mapping[str, Any],
    alias: str,
    *,
    compiler: ConditionCompiler | None = None,
) -> Select[Any]:
    """Compile *tree* against *alias* and add it to ``stmt``'s WHERE clause."""
    sink = SQLAlchemyClauseSink()
    apply_where_conditions(sink, JoinOperator.AND, tree, alias, compiler=compiler)
    clause = sink.build()
    if clause is None:
        return stmt
    return stmt.where(clause)


def apply_sort_order(
    stmt: Select[Any],
    sort: Mapping[str, Any],
    alias: str,
) -> Select[Any]:
    """Add ``ORDER BY`` entries for a sort directive such as ``{"name": "asc"}``."""
    order_clauses: list[Any] = []
    for field_alias, direction in parse_sort_order(sort, alias):
        column = literal_column(field_alias)
        order_clauses.append(
            column.asc() if direction is SortDirection.ASC else column.desc()
        )
    if order_clauses:
        return stmt.order_by(*order_clauses)
    return stmt
