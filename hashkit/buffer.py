"""Block buffering shared by the Merkle–Damgård style hashers."""

from __future__ import annotations

import abc
import copy
from collections.abc import Iterator

_U64_MASK = (1 << 64) - 1


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    """Yield consecutive ``size``-byte slices of ``data``."""
    for start in range(0, len(data), size):
        yield data[start:start + size]


def length_padding(bit_len: int, buffered: bytes, block_size: int, byteorder: str) -> bytes:
    """Pad the last partial block with 0x80, zeros and a 64-bit message length.

    The result is one or two whole blocks long.
    """
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', not {byteorder!r}")
    if block_size < 9:
        raise ValueError("block size must leave room for the length field")
    buffered = bytes(buffered)
    if len(buffered) >= block_size:
        raise ValueError("buffered data must be shorter than one block")
    padded = bytearray(buffered)
    padded.append(0x80)
    zeros = (block_size - 8 - len(padded)) % block_size
    padded.extend(bytes(zeros))
    padded.extend((bit_len & _U64_MASK).to_bytes(8, byteorder))
    return bytes(padded)


class BlockHasher(abc.ABC):
    """A hasher that feeds its compression function one full block at a time."""

    name: str = ""
    block_size: int = 64
    digest_size: int = 16

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return the hasher to its freshly created state."""
        self._buffer = bytearray()
        self._blocks = 0
        self._reset_state()

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        self._buffer += memoryview(data).cast("B")
        full = len(self._buffer) - len(self._buffer) % self.block_size
        if full:
            self._compress_all(bytes(self._buffer[:full]))
            self._blocks += full // self.block_size
            del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything absorbed so far, leaving the state intact."""
        return self.copy()._finalize(bytes(self._buffer))

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> BlockHasher:
        """Return an independent clone of the hasher."""
        return copy.deepcopy(self)

    @property
    def _bit_length(self) -> int:
        """Message length in bits, modulo 2**64."""
        total = self._blocks * self.block_size + len(self._buffer)
        return (total * 8) & _U64_MASK

    def _compress_all(self, data: bytes) -> None:
        for block in _chunks(data, self.block_size):
            self._compress(block)

    @abc.abstractmethod
    def _reset_state(self) -> None:
        """Set the chaining state to its initial value."""

    @abc.abstractmethod
    def _compress(self, block: bytes) -> None:
        """Process one full block."""

    @abc.abstractmethod
    def _finalize(self, tail: bytes) -> bytes:
        """Pad ``tail`` (shorter than a block), finish and return the digest."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} hasher>"