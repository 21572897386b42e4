"""A hash set that resolves collisions with quadratic probing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Hashable, Iterator

from probemap.primes import next_prime


class EntryState(enum.Enum):
    """Status of one slot in a probing table."""

    ACTIVE = "active"
    EMPTY = "empty"
    DELETED = "deleted"


@dataclass
class _Slot:
    element: Any = None
    state: EntryState = EntryState.EMPTY


class ProbingHashSet:
    """A set of hashable items stored in an open-addressed table.

    The table size is always prime; it grows to the next prime past twice
    its size once more than half of the slots have been used.
    """

    def __init__(self, size: int = 101) -> None:
        self._slots = [_Slot() for _ in range(next_prime(size))]
        self._used = 0
        self._count = 0

    def __contains__(self, item: Hashable) -> bool:
        return self._slots[self._find(item)].state is EntryState.ACTIVE

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (
            slot.element
            for slot in self._slots
            if slot.state is EntryState.ACTIVE
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add(self, item: Hashable) -> bool:
        """Insert ``item``; return False if it was already present."""
        slot = self._slots[self._find(item)]
        if slot.state is EntryState.ACTIVE:
            return False
        if slot.state is not EntryState.DELETED:
            self._used += 1
        slot.element = item
        slot.state = EntryState.ACTIVE
        self._count += 1
        if self._used > len(self._slots) // 2:
            self._rehash()
        return True

    def remove(self, item: Hashable) -> bool:
        """Remove ``item``; return False if it was not present."""
        slot = self._slots[self._find(item)]
        if slot.state is not EntryState.ACTIVE:
            return False
        slot.state = EntryState.DELETED
        self._count -= 1
        return True

    def clear(self) -> None:
        """Remove every item, keeping the current capacity."""
        for slot in self._slots:
            slot.state = EntryState.EMPTY
        self._used = 0
        self._count = 0

    def copy(self) -> ProbingHashSet:
        """Return an independent copy of this set."""
        clone = ProbingHashSet.__new__(ProbingHashSet)
        clone._slots = [_Slot(slot.element, slot.state) for slot in self._slots]
        clone._used = self._used
        clone._count = self._count
        return clone

    def capacity(self) -> int:
        """Return the number of slots in the underlying table."""
        return len(self._slots)

    def _find(self, item: Hashable) -> int:
        size = len(self._slots)
        offset = 1
        pos = hash(item) % size
        while True:
            slot = self._slots[pos]
            if slot.state is EntryState.EMPTY or slot.element == item:
                return pos
            pos += offset
            offset += 2
            if pos >= size:
                pos -= size

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [_Slot() for _ in range(next_prime(2 * len(old)))]
        self._used = 0
        self._count = 0
        for slot in old:
            if slot.state is EntryState.ACTIVE:
                self.add(slot.element)