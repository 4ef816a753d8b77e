"""Sequential skipfield with one skip bit per slot in 64-bit chunks."""

from __future__ import annotations

from collections.abc import Sequence

from skipfields.bitmask import _chunk_count, _first_clear, _locate
from skipfields.boolean import _parse_demo_args


class Skipfield:
    """A skipfield of ``length`` slots stored as 64-bit chunks of skip bits.

    Bits past ``length`` in the last chunk are not reserved and may be set.
    """

    def __init__(self, length: int) -> None:
        self._chunks = [0] * _chunk_count(length)
        self._length = length

    def __len__(self) -> int:
        return self._length

    def skip(self, index: int) -> None:
        """Set the skip bit of ``index``."""
        chunk_index, bit_index = _locate(index, self._chunks)
        self._chunks[chunk_index] |= 1 << bit_index

    def unskip(self, index: int) -> None:
        """Keep only the bit of ``index`` in its chunk, clearing every other bit there."""
        chunk_index, bit_index = _locate(index, self._chunks)
        self._chunks[chunk_index] &= 1 << bit_index

    def is_skipped(self, index: int) -> bool:
        """Whether ``index`` is the first slot of its chunk and that slot is skipped."""
        chunk_index, bit_index = _locate(index, self._chunks)
        return bit_index == 0 and bool(self._chunks[chunk_index] & 1)

    def first_free(self) -> int | None:
        """Index of the first clear bit across all chunks, or ``None``."""
        return _first_clear(self._chunks)

    def count_skipped(self) -> int:
        """The length minus the number of set bits: the count of slots still free."""
        return self._length - sum(chunk.bit_count() for chunk in self._chunks)


def main(argv: Sequence[str] | None = None) -> int:
    """Skip the first half of a large skipfield and print what it reports."""
    _parse_demo_args("Show a bitmask skipfield in action.", argv)

    sf = Skipfield(100_000)
    for index in range(50_000):
        sf.skip(index)

    report = {
        "First free": sf.first_free(),
        "Alive count": sf.count_skipped(),
        "Is idx 124 skipped": str(sf.is_skipped(124)).lower(),
    }
    for label, value in report.items():
        print(f"{label}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())