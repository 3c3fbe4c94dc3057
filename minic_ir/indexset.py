"""A set of non-negative indices with a nominal size, used like a bit vector."""

from __future__ import annotations

from typing import Iterator


class IndexSet:
    """Set of non-negative integers plus a count bounding the complement."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._members: set[int] = set()
        self._count = 0

    @property
    def count(self) -> int:
        """Number of indices the set nominally spans."""
        return self._count

    def init(self, count: int, val: bool) -> None:
        """Make the first ``count`` indices members (``val`` true) or non-members."""
        if self._count >= count and not val:
            self._count = count
            self._members.clear()
            return
        self._count = count
        self._apply(range(count), val)

    def init_range(self, start: int, stop: int, val: bool) -> None:
        """Make indices in ``[start, stop)`` members or non-members."""
        self._apply(range(start, stop), val)

    def _apply(self, indices: range, val: bool) -> None:
        if val:
            self._members.update(indices)
        else:
            self._members.difference_update(indices)

    def clear(self) -> None:
        self._members.clear()

    def _combine(self, other: IndexSet, members: set[int]) -> IndexSet:
        result = IndexSet()
        result._members = members
        result._count = max(self._count, other._count)
        return result

    def __and__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._members & other._members)

    def __or__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._members | other._members)

    def __sub__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._members - other._members)

    def __xor__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._members ^ other._members)

    def __invert__(self) -> IndexSet:
        result = IndexSet()
        result._members = set(range(self._count)) - self._members
        result._count = self._count
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexSet):
            return NotImplemented
        return self._members == other._members

    def get(self, n: int) -> bool:
        return n in self._members

    def set(self, n: int) -> None:
        if n < 0:
            raise ValueError("index must not be negative")
        self._members.add(n)

    def reset(self, n: int) -> None:
        self._members.discard(n)

    def max(self) -> int:
        """Largest member; the set must not be empty."""
        if not self._members:
            raise ValueError("max() of an empty set")
        return max(self._members)

    def min(self) -> int:
        """Smallest member; the set must not be empty."""
        if not self._members:
            raise ValueError("min() of an empty set")
        return min(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def __contains__(self, n: object) -> bool:
        return n in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __str__(self) -> str:
        return "".join(f"{n} " for n in sorted(self._members))

    def __repr__(self) -> str:
        return f"IndexSet({sorted(self._members)}, count={self._count})"