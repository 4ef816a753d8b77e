"""Skipfield that stores one boolean per slot."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


def _require_size(size: int) -> int:
    """Return ``size`` if it is a valid skipfield size, else raise ``ValueError``."""
    if size < 0:
        raise ValueError(f"skipfield size must not be negative, got {size}")
    return size


def _check_index(index: int, limit: int) -> int:
    """Return ``index`` if it lies in ``range(limit)``, else raise ``IndexError``."""
    if not 0 <= index < limit:
        raise IndexError(f"index {index} out of range (limit {limit})")
    return index


def _parse_demo_args(description: str, argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the arguments of a demonstration command, which takes none."""
    return argparse.ArgumentParser(description=description).parse_args(argv)


class BoolSkipfield:
    """A skipfield of ``size`` slots; ``True`` marks a skipped slot."""

    def __init__(self, size: int) -> None:
        self._flags = [False] * _require_size(size)

    def __len__(self) -> int:
        return len(self._flags)

    def _set(self, index: int, skipped: bool) -> None:
        self._flags[_check_index(index, len(self._flags))] = skipped

    def skip(self, index: int) -> None:
        """Mark the slot at ``index`` as skipped."""
        self._set(index, True)

    def unskip(self, index: int) -> None:
        """Mark the slot at ``index`` as active."""
        self._set(index, False)

    def is_skipped(self, index: int) -> bool:
        """Whether the slot at ``index`` is skipped."""
        return self._flags[_check_index(index, len(self._flags))]

    def count_skipped(self) -> int:
        """Number of skipped slots."""
        return sum(self._flags)

    def count_active(self) -> int:
        """Number of active slots."""
        return len(self._flags) - self.count_skipped()

    def active_indices(self) -> Iterator[int]:
        """Yield the indices of active slots in ascending order."""
        return (i for i, skipped in enumerate(self._flags) if not skipped)

    def first_active(self) -> int | None:
        """Index of the first active slot, or ``None`` if every slot is skipped."""
        return next(self.active_indices(), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate a small skipfield and print its counts."""
    _parse_demo_args("Show a small boolean skipfield in action.", argv)

    sf = BoolSkipfield(10)
    for index in (1, 3, 7):
        sf.skip(index)

    print(f"Skipped count: {sf.count_skipped()}")
    print(f"Active count: {sf.count_active()}")
    print(f"First active: {sf.first_active()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())