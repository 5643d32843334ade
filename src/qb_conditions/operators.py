from enum import Enum


class ConditionTarget(str, Enum):
    """Output encodings a condition can be compiled to."""

    QB = "qb"
    FIND = "find"


class ConditionOperator(str, Enum):
    """Operator tokens recognised inside a condition object."""

    # Set membership
    IN = "$in"
    NOT_IN = "$notIn"

    # Ordered comparison
    GTE = "$gte"
    LTE = "$lte"
    GT = "$gt"
    LT = "$lt"

    # Range
    BETWEEN = "$between"
    NOT_BETWEEN = "$notBetween"

    # Pattern matching
    CONTAINS = "$contains"
    NOT_CONTAINS = "$notContains"
    ICONTAINS = "$iContains"
    NOT_ICONTAINS = "$notIContains"
    STARTS_WITH = "$startsWith"
    NOT_STARTS_WITH = "$notStartsWith"
    ENDS_WITH = "$endsWith"
    NOT_ENDS_WITH = "$notEndsWith"

    # Regular expressions (PostgreSQL)
    REGEX = "$regex"
    NOT_REGEX = "$notRegex"
    REGEXI = "$regexi"
    NOT_REGEXI = "$notRegexi"

    # Equality
    EQUAL_TO = "$equalTo"
    NOT_EQUAL_TO = "$notEqualTo"

    # JSON (PostgreSQL jsonb)
    JSON_CONTAINS = "$jsonContains"
    JSON_CONTAINED = "$jsonContained"
    JSON_EQUALS = "$jsonEquals"
    JSON_HAS_KEY = "$jsonHasKey"

    @property
    def parameter_name(self) -> str:
        """Token without the leading ``$``, used inside bind parameter names."""
        return self.value[1:]


class ConditionSentinel(str, Enum):
    """Bare string conditions with a fixed meaning."""

    IS_NULL = "$isNull"
    IS_NOT_NULL = "$isNotNull"


class JoinOperator(str, Enum):
    """How a clause is joined to the clauses before it."""

    AND = "AND"
    OR = "OR"


class LogicalKey(str, Enum):
    """Filter tree keys that open a bracketed sub-group."""

    AND = "$and"
    OR = "$or"

    @property
    def join(self) -> JoinOperator:
        return JoinOperator.AND if self is LogicalKey.AND else JoinOperator.OR
