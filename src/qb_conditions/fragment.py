"""CompiledFragment — a parameterised WHERE clause fragment."""

from __future__ import annotations

from typing import Any, NamedTuple


class CompiledFragment(NamedTuple):
    """
    Query text plus its bind parameters.

    ``query`` uses ``:name`` placeholders, and ``:...name`` for parameters
    holding a list that must be expanded (``IN`` lists).
    """

    query: str
    parameters: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query, "parameters": dict(self.parameters)}
