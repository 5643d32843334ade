"""Shared fixtures for condition compiler tests."""

from __future__ import annotations

import pytest

from qb_conditions import ConditionCompiler, SequentialIdGenerator
from qb_conditions.operators_memory import build_default_memory_registry


@pytest.fixture
def id_generator():
    """Deterministic ids: ``p1``, ``p2``, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def compiler(id_generator):
    """Compiler with the default operators and deterministic parameter names."""
    return ConditionCompiler(id_generator=id_generator)


@pytest.fixture
def memory_registry():
    """Default in-memory operator registry."""
    return build_default_memory_registry()
