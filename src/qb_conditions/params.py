"""
Collision-free bind parameter naming.

Every compile call draws one id from an ``IdGenerator``; all parameters
produced by that call are named ``{id}_{operator}_{field}[_suffix]``.
The default generator is UUID based. ``SequentialIdGenerator`` gives a
deterministic, thread-safe sequence for reproducible tests.
"""

from __future__ import annotations

import itertools
import re
import threading
import uuid
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

_NON_WORD = re.compile(r"\W")

DEFAULT_FIELD_SEGMENT = "field"


@runtime_checkable
class IdGenerator(Protocol):
    """Returns a fresh identifier usable inside a bind parameter name."""

    def __call__(self) -> str: ...


def uuid_id_generator() -> str:
    return str(uuid.uuid4()).replace("-", "_")


class SequentialIdGenerator:
    """
    Deterministic id generator: ``p1``, ``p2``, ...

    Safe to share between threads.
    """

    def __init__(self, prefix: str = "p", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            return f"{self._prefix}{next(self._counter)}"


def field_segment(field_alias: object) -> str:
    """Turn a field alias into a bind-name safe segment (``a.b`` -> ``a_b``)."""
    if not isinstance(field_alias, str) or not field_alias.strip():
        return DEFAULT_FIELD_SEGMENT
    return _NON_WORD.sub("_", field_alias.strip())


@dataclass(frozen=True)
class BindContext:
    """Field alias plus the parameter prefix of a single compile call."""

    field_alias: str
    parameter_prefix: str

    @classmethod
    def create(
        cls,
        unique_id: str,
        operator_name: str,
        field_alias: object,
    ) -> BindContext:
        return cls(
            field_alias=field_alias if isinstance(field_alias, str) else "",
            parameter_prefix=(
                f"{unique_id}_{operator_name}_{field_segment(field_alias)}"
            ),
        )

    def parameter_name(self, suffix: str | None = None) -> str:
        if suffix:
            return f"{self.parameter_prefix}_{suffix}"
        return self.parameter_prefix
