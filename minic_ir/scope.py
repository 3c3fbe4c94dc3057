"""Nested variable scopes kept as a stack of name tables."""

from __future__ import annotations

from typing import Optional

from minic_ir.values import Value


class ScopeStack:
    """A stack of scopes, each mapping variable names to values."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, Value]] = []

    def _current(self) -> dict[str, Value]:
        if not self._scopes:
            raise IndexError("no scope is open")
        return self._scopes[-1]

    def enter_scope(self) -> None:
        """Open a new innermost scope."""
        self._scopes.append({})

    def leave_scope(self) -> None:
        """Close the innermost scope."""
        if not self._scopes:
            raise IndexError("no scope is open")
        self._scopes.pop()

    def insert_value(self, value: Value) -> None:
        """Add ``value`` to the innermost scope under its name; an existing entry is kept."""
        self._current().setdefault(value.name, value)

    def find_current_scope(self, name: str) -> Optional[Value]:
        """Look ``name`` up in the innermost scope only."""
        return self._current().get(name)

    def find_all_scopes(self, name: str) -> Optional[Value]:
        """Look ``name`` up from the innermost scope outwards."""
        for scope in reversed(self._scopes):
            found = scope.get(name)
            if found is not None:
                return found
        return None

    def current_level(self) -> int:
        """Depth of the innermost scope; the first scope is level 0."""
        return len(self._scopes) - 1