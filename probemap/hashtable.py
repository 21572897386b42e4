"""A key-value hash table that resolves collisions with quadratic probing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator

from probemap.hashset import EntryState
from probemap.primes import next_prime


@dataclass
class _Entry:
    key: Any = None
    value: Any = None
    state: EntryState = EntryState.EMPTY


class ProbingHashTable:
    """A mapping from hashable keys to values in an open-addressed table.

    The table size is always prime; it grows to the next prime past twice
    its size once more than half of the slots have been used.
    """

    def __init__(self, size: int = 101) -> None:
        self._slots = [_Entry() for _ in range(next_prime(size))]
        self._used = 0
        self._count = 0

    def __contains__(self, key: Hashable) -> bool:
        return self._slots[self._find(key)].state is EntryState.ACTIVE

    def __getitem__(self, key: Hashable) -> Any:
        entry = self._slots[self._find(key)]
        if entry.state is not EntryState.ACTIVE:
            raise KeyError(key)
        return entry.value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every active ``(key, value)`` pair."""
        return (
            (entry.key, entry.value)
            for entry in self._slots
            if entry.state is EntryState.ACTIVE
        )

    def insert(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key``; return False if the key is present."""
        entry = self._slots[self._find(key)]
        if entry.state is EntryState.ACTIVE:
            return False
        if entry.state is not EntryState.DELETED:
            self._used += 1
        entry.key = key
        entry.value = value
        entry.state = EntryState.ACTIVE
        self._count += 1
        if self._used > len(self._slots) // 2:
            self._rehash()
        return True

    def remove(self, key: Hashable) -> bool:
        """Remove the pair with ``key``; return False if it was not present."""
        entry = self._slots[self._find(key)]
        if entry.state is not EntryState.ACTIVE:
            return False
        entry.state = EntryState.DELETED
        self._count -= 1
        return True

    def clear(self) -> None:
        """Remove every pair, keeping the current capacity."""
        for entry in self._slots:
            entry.state = EntryState.EMPTY
        self._used = 0
        self._count = 0

    def capacity(self) -> int:
        """Return the number of slots in the underlying table."""
        return len(self._slots)

    def _find(self, key: Hashable) -> int:
        size = len(self._slots)
        offset = 1
        pos = hash(key) % size
        while True:
            entry = self._slots[pos]
            if entry.state is EntryState.EMPTY or entry.key == key:
                return pos
            pos += offset
            offset += 2
            if pos >= size:
                pos -= size

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [_Entry() for _ in range(next_prime(2 * len(old)))]
        self._used = 0
        self._count = 0
        for entry in old:
            if entry.state is EntryState.ACTIVE:
                self.insert(entry.key, entry.value)