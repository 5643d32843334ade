"""
SQLAlchemy collaborator.

Public API:
    - ``SQLAlchemyClauseSink`` — ``ClauseSink`` building a boolean expression
    - ``apply_where_conditions_to_select(stmt, tree, alias)``
    - ``apply_sort_order(stmt, sort, alias)``
    - ``fragment_to_clause(query, parameters)``
    - ``build_find_filter(columns, where)`` — finder-style ``{field: operator}``
    - ``SQLAlchemyFindOperator`` / ``SQLAlchemyFindOperatorRegistry`` —
      extension points for custom operators
"""

from .operators import (
    DEFAULT_SQLA_FIND_REGISTRY,
    SQLAlchemyFindOperator,
    SQLAlchemyFindOperatorRegistry,
    build_default_sqla_find_registry,
    build_find_filter,
)
from .where import (
    SQLAlchemyClauseSink,
    apply_sort_order,
    apply_where_conditions_to_select,
    fragment_to_clause,
)

__all__ = [
    "DEFAULT_SQLA_FIND_REGISTRY",
    "SQLAlchemyClauseSink",
    "SQLAlchemyFindOperator",
    "SQLAlchemyFindOperatorRegistry",
    "apply_sort_order",
    "apply_where_conditions_to_select",
    "build_default_sqla_find_registry",
    "build_find_filter",
    "fragment_to_clause",
]
