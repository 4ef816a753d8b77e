"""Skipfield that stores run lengths of skipped blocks at the block ends."""

from __future__ import annotations

from collections.abc import Iterator

from skipfields.boolean import _check_index, _require_size

_MAX_NODE = 0xFF


class LCJCSkipfield:
    """A skipfield of ``size`` slots using low-complexity jump counting.

    A zero node is an active slot. A run of skipped slots stores its length
    at its first and last node, so scans can jump over the whole run. Node
    values are bytes, so a run may be at most 255 slots long.
    """

    def __init__(self, size: int) -> None:
        self._nodes = [0] * _require_size(size)

    def __len__(self) -> int:
        return len(self._nodes)

    def _check(self, index: int) -> int:
        return _check_index(index, len(self._nodes))

    def _store(self, *updates: tuple[int, int]) -> None:
        """Write ``(index, value)`` pairs after checking all of them."""
        for index, value in updates:
            self._check(index)
            if not 0 <= value <= _MAX_NODE:
                raise OverflowError(f"skip block length {value} does not fit in a node")
        for index, value in updates:
            self._nodes[index] = value

    def skip(self, index: int) -> None:
        """Mark the slot at ``index`` as skipped, merging with neighbouring blocks."""
        self._check(index)
        nodes = self._nodes
        left = nodes[index - 1] if index > 0 else 0
        right = nodes[index + 1] if index + 1 < len(nodes) else 0
        value = left + right + 1

        if left and right:
            self._store((index - left, value), (index + right, value))
        else:
            self._store((index - left + right, value), (index, value))

    def unskip(self, index: int, start: int | None = None, end: int | None = None) -> None:
        """Mark the slot at ``index`` as active.

        ``start`` and ``end`` are the bounds of the skipped block holding
        ``index``, when known; they decide how the block is split or shrunk.
        """
        self._check(index)
        nodes = self._nodes
        if nodes[index] == 0:
            return

        if start is not None and end is not None and start < index < end:
            left_len = index - start
            right_len = end - index
            self._store(
                (start, left_len),
                (index - 1, left_len),
                (end, right_len),
                (index + 1, right_len),
                (index, 0),
            )
        elif start is not None and index == start:
            length = nodes[index] - 1
            self._store((index + 1, length), (index + length, length), (index, 0))
        elif end is not None and index == end:
            length = nodes[index] - 1
            self._store((index - 1, length), (index - length, length), (index, 0))
        else:
            self._store((index, 0))

    def is_skipped(self, index: int) -> bool:
        """Whether the node at ``index`` is non-zero."""
        return self._nodes[self._check(index)] != 0

    def count_skipped(self) -> int:
        """Number of skipped slots, summed from the block lengths."""
        return sum(self._nodes[position] for position in self.iter())

    def count_active(self) -> int:
        """Number of active slots."""
        return len(self._nodes) - self.count_skipped()

    def active_indices(self) -> Iterator[int]:
        """Yield active indices in ascending order, jumping over skipped blocks."""
        nodes = self._nodes
        position = 0
        while position < len(nodes):
            jump = nodes[position]
            if jump == 0:
                yield position
            position += jump or 1

    def first_active(self) -> int | None:
        """Index of the first active slot, or ``None`` if every slot is skipped."""
        return next(self.active_indices(), None)

    def debug(self) -> bytes:
        """The raw node values."""
        return bytes(self._nodes)

    def iter(self) -> Iterator[int]:
        """Walk the nodes, yielding each landing position and then jumping past it."""
        nodes = self._nodes
        position = 0
        while position < len(nodes):
            yield position
            position += nodes[position] + 1

    def __iter__(self) -> Iterator[int]:
        return self.iter()