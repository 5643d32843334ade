"""
Map abstract ``FindOperator`` values onto SQLAlchemy column expressions.

Uses the strategy pattern: each ``FindOperatorType`` is an isolated
``SQLAlchemyFindOperator`` registered in a
``SQLAlchemyFindOperatorRegistry``. ``NOT`` and ``RAW`` are handled by
the registry itself: ``NOT`` negates its compiled child, ``RAW``
renders its template for the column and binds its own parameters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_, not_, text, true

from ...compiler import get_default_compiler
from ...exceptions import ConditionError, ConditionParsingError
from ...find_operators import FindOperator, FindOperatorType

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ...compiler import ConditionCompiler


class SQLAlchemyFindOperator(ABC):
    """
    Strategy interface for compiling a ``FindOperator`` into a
    SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> FindOperatorType:
        """The operator type this strategy handles."""
        ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The operand carried by the ``FindOperator``.
        """
        ...


class EqualOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.EQUAL

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column == value)


class InOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.in_(value))


class MoreThanOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.MORE_THAN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column > value)


class MoreThanOrEqualOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.MORE_THAN_OR_EQUAL

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column >= value)


class LessThanOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LESS_THAN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column < value)


class LessThanOrEqualOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LESS_THAN_OR_EQUAL

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column <= value)


class BetweenOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.between(value[0], value[1]))


class LikeOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LIKE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.like(value))


class ILikeOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.ILIKE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.ilike(value))


class IsNullOperator(SQLAlchemyFindOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.IS_NULL

    def apply(self, column: Any, _value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_(None))


class SQLAlchemyFindOperatorRegistry:
    """
    Registry of ``SQLAlchemyFindOperator`` instances keyed by
    :class:`FindOperatorType`.
    """

    def __init__(self) -> None:
        self._operators: dict[FindOperatorType, SQLAlchemyFindOperator] = {}

    def register(self, operator: SQLAlchemyFindOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyFindOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: FindOperatorType) -> SQLAlchemyFindOperator | None:
        return self._operators.get(name)

    def apply(
        self,
        operator: FindOperator,
        column: Any,
        *,
        alias: str | None = None,
    ) -> ColumnElement[bool]:
        """
        Compile *operator* against *column*.

        ``alias`` is the text substituted into ``RAW`` templates; it defaults
        to the column's string form (``table.column``).

        Raises:
            ValueError: If the operator type is not registered.
        """
        if operator.type is FindOperatorType.NOT:
            child = operator.child
            if child.type is FindOperatorType.NOT:
                return self.apply(child.child, column, alias=alias)
            if child.type is FindOperatorType.RAW:
                return self._raw(child, column, alias, negated=True)
            return cast(
                "ColumnElement[bool]", not_(self.apply(child, column, alias=alias))
            )
        if operator.type is FindOperatorType.RAW:
            return self._raw(operator, column, alias)
        op = self.get(operator.type)
        if op is None:
            raise ValueError(f"Unsupported operator for SQLAlchemy: {operator.type}")
        return op.apply(column, operator.value)

    def _raw(
        self,
        operator: FindOperator,
        column: Any,
        alias: str | None,
        *,
        negated: bool = False,
    ) -> ColumnElement[bool]:
        # text() clauses cannot be wrapped by not_()
        sql = operator.render(alias or str(column))
        if negated:
            sql = f"NOT ({sql})"
        return cast(
            "ColumnElement[bool]", text(sql).bindparams(**operator.parameters)
        )


def build_default_sqla_find_registry() -> SQLAlchemyFindOperatorRegistry:
    registry = SQLAlchemyFindOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        InOperator(),
        MoreThanOperator(),
        MoreThanOrEqualOperator(),
        LessThanOperator(),
        LessThanOrEqualOperator(),
        BetweenOperator(),
        LikeOperator(),
        ILikeOperator(),
        IsNullOperator(),
    )
    return registry


DEFAULT_SQLA_FIND_REGISTRY: SQLAlchemyFindOperatorRegistry = (
    build_default_sqla_find_registry()
)


def build_find_filter(
    columns: Any,
    where: Mapping[str, Any],
    *,
    registry: SQLAlchemyFindOperatorRegistry | None = None,
    compiler: ConditionCompiler | None = None,
) -> ColumnElement[bool]:
    """
    AND together a finder-style ``{field: operator}`` mapping.

    Values may be ``FindOperator`` instances or raw conditions, which are
    compiled in ``find`` mode first.

    Args:
        columns: Column collection looked up by field name, e.g. ``table.c``.
        where: Field name to operator or condition.
    """
    reg = registry or DEFAULT_SQLA_FIND_REGISTRY
    compiler = compiler or get_default_compiler()
    clauses: list[ColumnElement[bool]] = []
    for field, condition in where.items():
        if isinstance(condition, FindOperator):
            operator = condition
        else:
            try:
                operator = compiler.to_find_operator(condition, field)
            except ConditionError as exc:
                raise ConditionParsingError(field, exc) from exc
        clauses.append(reg.apply(operator, columns[field]))
    if not clauses:
        return cast("ColumnElement[bool]", true())
    return cast("ColumnElement[bool]", and_(*clauses))
