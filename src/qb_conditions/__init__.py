from .compiler import (
    ConditionCompiler,
    FindOperatorRenderer,
    FragmentRenderer,
    get_default_compiler,
    parse_condition,
)
from .composer import (
    apply_filters,
    apply_where_condition,
    apply_where_conditions,
    resolve_field_alias,
)
from .conditions import (
    ArrayCondition,
    LiteralCondition,
    OperatorCondition,
    SentinelCondition,
    classify_condition,
)
from .evaluator import (
    FilterEvaluator,
    MemoryOperator,
    MemoryOperatorRegistry,
    RawMemoryOperator,
)
from .exceptions import (
    AmbiguousConditionShapeError,
    ConditionError,
    ConditionParsingError,
    InvalidConditionShapeError,
    InvalidFieldReferenceError,
    InvalidOperandShapeError,
    MissingConditionError,
    MissingOperatorValueError,
    ParameterCollisionError,
    UnknownOperatorError,
    UnsupportedTargetModeError,
)
from .find_operators import FindOperator, FindOperatorType
from .fragment import CompiledFragment
from .operators import (
    ConditionOperator,
    ConditionSentinel,
    ConditionTarget,
    JoinOperator,
    LogicalKey,
)
from .operators_builtin import DEFAULT_REGISTRY, build_default_registry
from .operators_memory import build_default_memory_registry
from .params import BindContext, IdGenerator, SequentialIdGenerator, uuid_id_generator
from .sink import ClauseSink, WhereClauseBuilder
from .sorting import SortDirection, parse_sort_order, resolve_sort_direction
from .strategy import ConditionOperatorRegistry, ConditionOperatorStrategy

__all__ = [
    # Core types
    "ConditionTarget",
    "ConditionOperator",
    "ConditionSentinel",
    "JoinOperator",
    "LogicalKey",
    "CompiledFragment",
    "FindOperator",
    "FindOperatorType",
    # Classification
    "classify_condition",
    "OperatorCondition",
    "ArrayCondition",
    "SentinelCondition",
    "LiteralCondition",
    # Compiler
    "ConditionCompiler",
    "FragmentRenderer",
    "FindOperatorRenderer",
    "get_default_compiler",
    "parse_condition",
    # Strategies
    "ConditionOperatorStrategy",
    "ConditionOperatorRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    # Parameter naming
    "BindContext",
    "IdGenerator",
    "SequentialIdGenerator",
    "uuid_id_generator",
    # Composer / sinks
    "ClauseSink",
    "WhereClauseBuilder",
    "apply_where_conditions",
    "apply_where_condition",
    "apply_filters",
    "resolve_field_alias",
    # Sorting
    "SortDirection",
    "parse_sort_order",
    "resolve_sort_direction",
    # In-memory evaluation
    "FilterEvaluator",
    "MemoryOperator",
    "RawMemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_memory_registry",
    # Exceptions
    "ConditionError",
    "UnsupportedTargetModeError",
    "InvalidFieldReferenceError",
    "MissingConditionError",
    "AmbiguousConditionShapeError",
    "MissingOperatorValueError",
    "UnknownOperatorError",
    "InvalidOperandShapeError",
    "InvalidConditionShapeError",
    "ParameterCollisionError",
    "ConditionParsingError",
]
