"""Thread-safe boolean skipfield with atomic swap semantics."""

from __future__ import annotations

import threading
from collections.abc import Iterator


class LockLessBoolSkipfield:
    """A skipfield of ``size`` slots that may be shared between threads.

    ``True`` marks an active slot; every slot starts skipped. Each change is
    an atomic swap that reports whether the slot's state actually changed.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._flags = [False] * size
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._flags)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._flags):
            raise IndexError(f"index {index} out of range for skipfield of size {len(self._flags)}")
        return index

    def _swap(self, index: int, value: bool) -> bool:
        self._check(index)
        with self._guard:
            previous = self._flags[index]
            self._flags[index] = value
        return previous

    def unskip(self, index: int) -> bool:
        """Mark the slot active; ``True`` if it was skipped before."""
        return not self._swap(index, True)

    def skip(self, index: int) -> bool:
        """Mark the slot skipped; ``True`` if it was active before."""
        return self._swap(index, False)

    def is_active(self, index: int) -> bool:
        """Whether the slot at ``index`` is active."""
        return self._flags[self._check(index)]

    def alive_indices(self) -> Iterator[int]:
        """Yield the indices of active slots in ascending order."""
        return (i for i, active in enumerate(self._flags) if active)