"""
``ClauseSink``: the accumulator compiled fragments are merged into.

The composer only needs two capabilities from a query builder: add a
clause joined with AND/OR, and open a bracketed sub-group. Any query
builder adapter implementing ``ClauseSink`` can receive a filter tree.

``WhereClauseBuilder`` is the reference implementation. It renders the
clauses the way a SQL query builder chains ``andWhere``/``orWhere``
calls::

    builder = WhereClauseBuilder()
    builder.where(JoinOperator.AND, "e.name = :p1", {"p1": "John"})
    group = builder.group(JoinOperator.AND)
    group.where(JoinOperator.OR, "e.age = :p2", {"p2": 30})
    group.where(JoinOperator.OR, "e.age = :p3", {"p3": 40})
    builder.build().query
    # 'e.name = :p1 AND (e.age = :p2 OR e.age = :p3)'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .exceptions import ParameterCollisionError
from .fragment import CompiledFragment
from .operators import JoinOperator

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class ClauseSink(Protocol):
    def where(
        self,
        join: JoinOperator,
        query: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        """Append a clause, joined to the previous one with *join*."""
        ...

    def group(self, join: JoinOperator) -> ClauseSink:
        """Open a bracketed sub-group joined with *join* and return it."""
        ...


@dataclass
class _Clause:
    join: JoinOperator
    query: str
    parameters: dict[str, Any]


@dataclass
class _Group:
    join: JoinOperator
    builder: WhereClauseBuilder


class WhereClauseBuilder:
    """In-memory ``ClauseSink`` producing a single ``CompiledFragment``."""

    def __init__(self) -> None:
        self._items: list[_Clause | _Group] = []
        self._parameters: dict[str, Any] = {}
        self._root: WhereClauseBuilder = self

    # -- ClauseSink ----------------------------------------------------------

    def where(
        self,
        join: JoinOperator,
        query: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        self._root._bind_all(parameters or {})
        self._items.append(_Clause(JoinOperator(join), query, dict(parameters or {})))

    def group(self, join: JoinOperator) -> WhereClauseBuilder:
        child = WhereClauseBuilder()
        child._root = self._root
        self._items.append(_Group(JoinOperator(join), child))
        return child

    # -- output --------------------------------------------------------------

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self._root._parameters)

    def render(self) -> str:
        """Render the clause text; the join of the first clause is dropped."""
        parts: list[str] = []
        for item in self._items:
            if isinstance(item, _Group):
                text = item.builder.render()
                if not text:
                    continue
                text = f"({text})"
            else:
                text = item.query
            if parts:
                parts.append(f"{item.join.value} {text}")
            else:
                parts.append(text)
        return " ".join(parts)

    def build(self) -> CompiledFragment:
        return CompiledFragment(self.render(), self.parameters)

    def is_empty(self) -> bool:
        return not self.render()

    def replay(self, sink: ClauseSink) -> None:
        """Re-apply every clause and group, in order, to another sink."""
        for item in self._items:
            if isinstance(item, _Group):
                item.builder.replay(sink.group(item.join))
            else:
                sink.where(item.join, item.query, item.parameters)

    # -- internals -----------------------------------------------------------

    def _bind_all(self, parameters: Mapping[str, Any]) -> None:
        for name in parameters:
            if name in self._parameters:
                raise ParameterCollisionError(name)
        self._parameters.update(parameters)
