"""LIKE / ILIKE pattern operators."""

from __future__ import annotations

import re
from typing import Any

from ..evaluator import MemoryOperator
from ..find_operators import FindOperatorType


def like_to_regex(pattern: str) -> str:
    """Convert a SQL LIKE pattern (``%``, ``_``) to an anchored Python regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


class LikeOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.LIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(
            re.match(like_to_regex(str(condition_value)), str(field_value), re.DOTALL)
        )


class ILikeOperator(MemoryOperator):
    @property
    def name(self) -> FindOperatorType:
        return FindOperatorType.ILIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(
            re.match(
                like_to_regex(str(condition_value)),
                str(field_value),
                re.IGNORECASE | re.DOTALL,
            )
        )
