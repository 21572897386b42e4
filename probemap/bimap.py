"""A one-to-one map between keys and values."""

from __future__ import annotations

from typing import Any, Hashable

from probemap.hashtable import ProbingHashTable


class BiMap:
    """A bijective map backed by two quadratic-probing hash tables.

    Every key maps to exactly one value and every value to exactly one key,
    so pairs can be looked up or removed from either side.
    """

    def __init__(self, size: int = 101) -> None:
        self._by_key = ProbingHashTable(size)
        self._by_value = ProbingHashTable(size)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._by_key.items())!r})"

    def clear(self) -> None:
        """Remove every pair."""
        self._by_key.clear()
        self._by_value.clear()
        self._count = 0

    def insert(self, key: Hashable, value: Hashable) -> bool:
        """Add the pair; return False if the key or the value is already used."""
        if key in self._by_key or value in self._by_value:
            return False
        self._by_key.insert(key, value)
        self._by_value.insert(value, key)
        self._count += 1
        return True

    def contains_key(self, key: Hashable) -> bool:
        """Return True if ``key`` is the key of a current pair."""
        return key in self._by_key

    def contains_value(self, value: Hashable) -> bool:
        """Return True if ``value`` is the value of a current pair."""
        return value in self._by_value

    def remove_key(self, key: Hashable) -> bool:
        """Remove the pair with ``key``; return False if there is none."""
        if key not in self._by_key:
            return False
        self._by_value.remove(self._by_key[key])
        self._by_key.remove(key)
        self._count -= 1
        return True

    def remove_value(self, value: Hashable) -> bool:
        """Remove the pair with ``value``; return False if there is none."""
        if value not in self._by_value:
            return False
        self._by_key.remove(self._by_value[value])
        self._by_value.remove(value)
        self._count -= 1
        return True

    def get_key(self, value: Hashable) -> Any:
        """Return the key paired with ``value``; raise KeyError if absent."""
        if value not in self._by_value:
            raise KeyError(value)
        return self._by_value[value]

    def get_value(self, key: Hashable) -> Any:
        """Return the value paired with ``key``; raise KeyError if absent."""
        if key not in self._by_key:
            raise KeyError(key)
        return self._by_key[key]