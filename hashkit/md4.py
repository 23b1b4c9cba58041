"""The MD4 message digest."""

from __future__ import annotations

import struct

from .buffer import BlockHasher, _chunks, length_padding

_MASK = 0xFFFFFFFF
_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)
_ROUND2 = 0x5A827999
_ROUND3 = 0x6ED9EBA1


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _f(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & _MASK & z)


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | (x & z) | (y & z)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _op1(a: int, b: int, c: int, d: int, k: int, s: int) -> int:
    return _rotl((a + _f(b, c, d) + k) & _MASK, s)


def _op2(a: int, b: int, c: int, d: int, k: int, s: int) -> int:
    return _rotl((a + _g(b, c, d) + k + _ROUND2) & _MASK, s)


def _op3(a: int, b: int, c: int, d: int, k: int, s: int) -> int:
    return _rotl((a + _h(b, c, d) + k + _ROUND3) & _MASK, s)


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    data = struct.unpack("<16I", block)
    a, b, c, d = state

    for i in (0, 4, 8, 12):
        a = _op1(a, b, c, d, data[i], 3)
        d = _op1(d, a, b, c, data[i + 1], 7)
        c = _op1(c, d, a, b, data[i + 2], 11)
        b = _op1(b, c, d, a, data[i + 3], 19)

    for i in range(4):
        a = _op2(a, b, c, d, data[i], 3)
        d = _op2(d, a, b, c, data[i + 4], 5)
        c = _op2(c, d, a, b, data[i + 8], 9)
        b = _op2(b, c, d, a, data[i + 12], 13)

    for i in (0, 2, 1, 3):
        a = _op3(a, b, c, d, data[i], 3)
        d = _op3(d, a, b, c, data[i + 8], 9)
        c = _op3(c, d, a, b, data[i + 4], 11)
        b = _op3(b, c, d, a, data[i + 12], 15)

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d)))


class Md4(BlockHasher):
    """MD4 hasher state."""

    name = "md4"
    block_size = 64
    digest_size = 16

    def _reset_state(self) -> None:
        self._state = _IV

    def _compress(self, block: bytes) -> None:
        self._state = _compress(self._state, block)

    def _finalize(self, tail: bytes) -> bytes:
        padded = length_padding(self._bit_length, tail, self.block_size, "little")
        for block in _chunks(padded, self.block_size):
            self._compress(block)
        return struct.pack("<4I", *self._state)


def md4(data: bytes) -> bytes:
    """Return the MD4 digest of ``data``."""
    return Md4(data).digest()