# skipfields

A small collection of skipfields: structures that track which slots of a
fixed-size container are skipped (erased) and which are active, and let you
find or walk the active ones.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The skipfields

| Class | Module | Storage |
| --- | --- | --- |
| `BoolSkipfield` | `skipfields.boolean` | one flag per slot |
| `BitmaskSkipfield` | `skipfields.bitmask` | 64-bit chunks, one bit per slot |
| `LCJCSkipfield` | `skipfields.lcjc` | low-complexity jump-counting: skip block lengths stored at block ends |
| `LockLessBoolSkipfield` | `skipfields.lockless` | per-slot flags, changed under a lock so threads may share them |
| `Skipfield` | `skipfields.seq` | 64-bit chunks with `first_free` lookup |

Every skipfield has a fixed size set at construction and supports `len()`.
A negative size raises `ValueError`. An index outside the field raises
`IndexError`; for the two chunked fields (`BitmaskSkipfield` and `Skipfield`)
the bound is the capacity of the allocated chunks, a multiple of 64, rather
than the length itself.

### BoolSkipfield

```python
from skipfields.boolean import BoolSkipfield

sf = BoolSkipfield(10)
sf.skip(1)
sf.skip(3)
sf.skip(7)

sf.count_skipped()          # 3
sf.count_active()           # 7
sf.first_active()           # 0
list(sf.active_indices())   # [0, 2, 4, 5, 6, 8, 9]
sf.unskip(3)
sf.is_skipped(3)            # False
```

`first_active()` returns `None` when every slot is skipped.

### BitmaskSkipfield

The same operations, with the flags packed into 64-bit chunks. Bits past the
length in the last chunk are kept set, so they never show up as active and are
not counted by `count_skipped()`.

```python
from skipfields.bitmask import BitmaskSkipfield

sf = BitmaskSkipfield(70)
sf.skip(0)
sf.skip(64)

sf.first_active()   # 1
sf.count_skipped()  # 2
sf.count_active()   # 68
list(sf)            # every index below 70 except 0 and 64
```

`active_indices_1()` tests each index in turn; `active_indices_2()` walks the
clear bits of each chunk. `iter()`, and iterating the object directly, yields
the same indices as `active_indices_2()`.

### LCJCSkipfield

A jump-counting skipfield: a zero node is an active slot, and each run of
skipped slots stores its length at its first and last node, so scans jump over
whole runs. Node values are bytes, so `skip()` raises `OverflowError` if a run
would grow past 255 slots.

```python
from skipfields.lcjc import LCJCSkipfield

sf = LCJCSkipfield(8)
sf.skip(1)
sf.skip(2)
sf.skip(5)

list(sf.active_indices())   # [0, 3, 4, 6, 7]
sf.first_active()           # 0
sf.count_skipped()          # 3
sf.debug()                  # the raw node values, as bytes
```

`unskip(index, start=None, end=None)` takes the bounds of the skipped block
holding `index`, when known; they decide whether the block is split, shrunk
from its start, shrunk from its end, or only the node cleared:

```python
sf = LCJCSkipfield(10)
for i in (1, 2, 3):
    sf.skip(i)
sf.unskip(2, 1, 3)      # middle of the block 1..3
sf.unskip(1, 1, None)   # start of a block
```

`iter()`, and iterating the object directly, walks the nodes: it yields each
position it lands on and then jumps past that node's value. `count_skipped()`
sums the node values at those positions.

### LockLessBoolSkipfield

All slots start skipped. `unskip()` and `skip()` swap one slot under a lock and
report whether they changed anything, so several threads may share one field.

```python
from skipfields.lockless import LockLessBoolSkipfield

sf = LockLessBoolSkipfield(4)
sf.unskip(2)              # True: slot 2 was skipped and is now active
sf.unskip(2)              # False: already active
sf.is_active(2)           # True
list(sf.alive_indices())  # [2]
sf.skip(2)                # True: slot 2 was active
```

### Skipfield

A bit-packed field in 64-bit chunks. Its operations behave as follows:

- `skip(index)` sets the bit of `index`.
- `unskip(index)` keeps only the bit of `index` in its chunk and clears every
  other bit of that chunk.
- `is_skipped(index)` is true only when `index` is the first slot of its chunk
  and that slot's bit is set.
- `first_free()` returns the position of the first clear bit over all chunks,
  or `None`.
- `count_skipped()` returns the length minus the number of set bits, that is,
  the number of slots still free.

```python
from skipfields.seq import Skipfield

sf = Skipfield(100_000)
for i in range(50_000):
    sf.skip(i)
sf.first_free()      # 50000
sf.count_skipped()   # 50000
sf.is_skipped(0)     # True
sf.is_skipped(124)   # False
```

## Commands

Two small demonstrations are installed. Neither takes arguments beyond `-h`.

```
skipfields-bool-demo
skipfields-seq-demo
```

`skipfields-bool-demo` skips slots 1, 3 and 7 of a ten-slot `BoolSkipfield`
and prints:

```
Skipped count: 3
Active count: 7
First active: 0
```

`skipfields-seq-demo` skips the first half of a 100,000-slot `Skipfield` and
prints what `first_free`, `count_skipped` and `is_skipped(124)` report:

```
First free: 50000
Alive count: 50000
Is idx 124 skipped: false
```