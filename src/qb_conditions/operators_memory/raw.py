"""Raw operators: PostgreSQL regular expressions and jsonb checks."""

from __future__ import annotations

import json
import re
from typing import Any

from ..evaluator import RawMemoryOperator
from ..operators import ConditionOperator


def _load_json(value: Any) -> Any:
    if isinstance(value, str | bytes):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def _json_contains(haystack: Any, needle: Any) -> bool:
    """
    Recursive containment check.

    Mirrors PostgreSQL ``@>`` semantics:
    ``{"a": 1, "b": {"c": 2}} @> {"b": {"c": 2}}`` is True.
    """
    if isinstance(needle, dict) and isinstance(haystack, dict):
        return all(
            k in haystack and _json_contains(haystack[k], v) for k, v in needle.items()
        )
    if isinstance(needle, list) and isinstance(haystack, list):
        return all(any(_json_contains(h, n) for h in haystack) for n in needle)
    if isinstance(haystack, list) and not isinstance(needle, dict | list):
        # a jsonb array contains a primitive it holds
        return needle in haystack
    return bool(haystack == needle)


class RegexOperator(RawMemoryOperator):
    """``~`` — unanchored, case-sensitive match."""

    flags = 0
    negated = False

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.REGEX

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        matched = re.search(str(condition_value), str(field_value), self.flags)
        return (matched is None) if self.negated else (matched is not None)


class NotRegexOperator(RegexOperator):
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_REGEX


class IRegexOperator(RegexOperator):
    flags = re.IGNORECASE

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.REGEXI


class NotIRegexOperator(RegexOperator):
    flags = re.IGNORECASE
    negated = True

    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.NOT_REGEXI


class JsonContainsOperator(RawMemoryOperator):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return _json_contains(_load_json(field_value), condition_value)


class JsonContainedOperator(RawMemoryOperator):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_CONTAINED

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return _json_contains(condition_value, _load_json(field_value))


class JsonEqualsOperator(RawMemoryOperator):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_EQUALS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(_load_json(field_value) == condition_value)


class JsonHasKeyOperator(RawMemoryOperator):
    @property
    def name(self) -> ConditionOperator:
        return ConditionOperator.JSON_HAS_KEY

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        document = _load_json(field_value)
        if isinstance(document, dict | list):
            # object keys, or string elements of an array
            return str(condition_value) in document
        return False
