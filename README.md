# probemap

This package has no dependencies. It provides small containers that use open
addressing with quadratic probing:

- `ProbingHashSet` (in `probemap.hashset`) is a set of hashable items.
- `ProbingHashTable` (in `probemap.hashtable`) maps hashable keys to values.
- `BiMap` (in `probemap.bimap`) is a one-to-one map. You can look up a value
  by its key, or a key by its value.

Each slot of a table is in one of three states, given by the `EntryState`
enum in `probemap.hashset`: `ACTIVE`, `EMPTY` or `DELETED`.

The number of slots in a table is always an odd prime. The helpers in
`probemap.primes` choose it:

- `is_prime(n)` tests whether `n` is prime.
- `next_prime(n)` returns the smallest odd prime that is at least `n`. An even
  `n` is first raised by one, so `next_prime` never returns 2.

A new table gets `next_prime(size)` slots. The default `size` is 101.

A table grows once more than half of its slots have been used. It grows to
`next_prime(2 * capacity)` slots. A removed item leaves its slot marked
`DELETED`, and that slot still counts as used. It stops counting when the
table is cleared or grows. A new item that lands on a deleted slot reuses it.

## Installation

```
pip install probemap
```

## Usage

### Sets

```python
from probemap.hashset import ProbingHashSet

s = ProbingHashSet(101)
s.add(37)          # True: the item was added
s.add(37)          # False: it was already present
37 in s            # True
list(s)            # [37]; iteration follows slot order
t = s.copy()       # an independent copy
s.remove(37)       # True; removing a missing item returns False
len(s), s.capacity()   # (0, 101)
s.clear()          # empties the set and keeps the capacity
```

### Key/value tables

```python
from probemap.hashtable import ProbingHashTable

t = ProbingHashTable(101)
t.insert("a", 1)   # True
t.insert("a", 2)   # False: the key is present, and its value stays 1
t["a"]             # 1; a missing key raises KeyError
"a" in t           # True
list(t)            # ["a"]: iteration yields the keys
dict(t.items())    # {"a": 1}
t.remove("a")      # True; removing a missing key returns False
```

`insert` never replaces a value. To change the value for a key, call `remove`
first and then `insert`.

### Bidirectional maps

```python
from probemap.bimap import BiMap

bm = BiMap(101)
bm.insert(1, 100)       # True
bm.insert(1, 200)       # False: the key 1 is already used
bm.insert(2, 100)       # False: the value 100 is already used
bm.get_value(1)         # 100
bm.get_key(100)         # 1
bm.contains_value(100)  # True
bm.remove_value(100)    # True; this also removes the key 1
bm.contains_key(1)      # False
len(bm)                 # 0
bm.clear()              # removes every pair
```

`get_key` and `get_value` raise `KeyError` when the value or key is not in the
map. In the same case, `remove_key` and `remove_value` return `False`.

## What it does not do

- None of the containers is thread-safe.
- The containers cannot shrink. Only `clear` removes the marks that removed
  items leave behind, and the capacity stays the same.
- A `BiMap` cannot be iterated, and it does not support `in`. Use
  `contains_key` or `contains_value` instead.
- The package has no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```