"""Skipfield that stores one skip bit per slot, packed into 64-bit chunks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from skipfields.boolean import _check_index, _require_size

_CHUNK_BITS = 64
_CHUNK_MASK = (1 << _CHUNK_BITS) - 1


def _chunk_count(length: int) -> int:
    """Number of 64-bit chunks needed for ``length`` bits."""
    return (_require_size(length) + _CHUNK_BITS - 1) // _CHUNK_BITS


def _locate(index: int, chunks: Sequence[int]) -> tuple[int, int]:
    """Chunk and bit position of ``index``; raises ``IndexError`` past the chunks."""
    return divmod(_check_index(index, len(chunks) * _CHUNK_BITS), _CHUNK_BITS)


def _clear_bits(chunk: int) -> Iterator[int]:
    """Yield the positions of the clear bits of a 64-bit chunk, lowest first."""
    inverted = ~chunk & _CHUNK_MASK
    while inverted:
        yield (inverted & -inverted).bit_length() - 1
        inverted &= inverted - 1


def _first_clear(chunks: Sequence[int]) -> int | None:
    """Overall position of the first clear bit across ``chunks``, or ``None``."""
    for chunk_index, chunk in enumerate(chunks):
        for bit in _clear_bits(chunk):
            return chunk_index * _CHUNK_BITS + bit
    return None


class BitmaskSkipfield:
    """A skipfield of ``length`` slots, one bit per slot; a set bit means skipped.

    Bits past ``length`` in the last chunk are permanently marked as skipped,
    so scans never report them as active.
    """

    def __init__(self, length: int) -> None:
        num_chunks = _chunk_count(length)
        self._chunks = [0] * num_chunks
        self._length = length

        extra_bits = num_chunks * _CHUNK_BITS - length
        if extra_bits > 0:
            self._chunks[-1] |= (_CHUNK_MASK << (_CHUNK_BITS - extra_bits)) & _CHUNK_MASK

    def __len__(self) -> int:
        return self._length

    def skip(self, index: int) -> None:
        """Mark the slot at ``index`` as skipped."""
        chunk_index, bit_index = _locate(index, self._chunks)
        self._chunks[chunk_index] |= 1 << bit_index

    def unskip(self, index: int) -> None:
        """Mark the slot at ``index`` as active."""
        chunk_index, bit_index = _locate(index, self._chunks)
        self._chunks[chunk_index] &= ~(1 << bit_index) & _CHUNK_MASK

    def is_skipped(self, index: int) -> bool:
        """Whether the slot at ``index`` is skipped."""
        chunk_index, bit_index = _locate(index, self._chunks)
        return bool(self._chunks[chunk_index] >> bit_index & 1)

    def first_active(self) -> int | None:
        """Index of the first active slot, or ``None`` if every slot is skipped."""
        return _first_clear(self._chunks)

    def count_skipped(self) -> int:
        """Number of skipped slots within the skipfield's length."""
        full_chunks, tail_bits = divmod(self._length, _CHUNK_BITS)
        count = sum(chunk.bit_count() for chunk in self._chunks[:full_chunks])
        if tail_bits:
            count += (self._chunks[full_chunks] & ((1 << tail_bits) - 1)).bit_count()
        return count

    def count_active(self) -> int:
        """Number of active slots."""
        return self._length - self.count_skipped()

    def active_indices_1(self) -> Iterator[int]:
        """Yield active indices by testing every slot in turn."""
        return (i for i in range(self._length) if not self.is_skipped(i))

    def active_indices_2(self) -> Iterator[int]:
        """Yield active indices by walking the clear bits of each chunk."""
        for chunk_index, chunk in enumerate(self._chunks):
            base = chunk_index * _CHUNK_BITS
            yield from (base + bit for bit in _clear_bits(chunk))

    def iter(self) -> Iterator[int]:
        """Iterator over active indices in ascending order."""
        return self.active_indices_2()

    def __iter__(self) -> Iterator[int]:
        return self.iter()