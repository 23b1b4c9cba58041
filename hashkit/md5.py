"""The MD5 message digest."""

from __future__ import annotations

import struct

from .buffer import BlockHasher, _chunks, length_padding

_MASK = 0xFFFFFFFF
_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_RC = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))

# (round, message word, rotation) for each of the 64 steps.
_SCHEDULE = tuple(
    (rnd, index, _SHIFTS[rnd][step % 4])
    for rnd, indices in enumerate((
        [i for i in range(16)],
        [(1 + 5 * i) % 16 for i in range(16)],
        [(5 + 3 * i) % 16 for i in range(16)],
        [(7 * i) % 16 for i in range(16)],
    ))
    for step, index in enumerate(indices)
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def compress_block(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Run the MD5 compression function on one 64-byte block and return the new state."""
    if len(block) != 64:
        raise ValueError(f"MD5 blocks are 64 bytes, got {len(block)}")
    data = struct.unpack("<16I", block)
    a, b, c, d = state
    for (rnd, index, shift), rc in zip(_SCHEDULE, _RC):
        if rnd == 0:
            f = (b & c) | (~b & d)
        elif rnd == 1:
            f = (b & d) | (c & ~d)
        elif rnd == 2:
            f = b ^ c ^ d
        else:
            f = c ^ (b | (~d & _MASK))
        f &= _MASK
        rotated = _rotl((f + a + data[index] + rc) & _MASK, shift)
        a, b, c, d = d, (rotated + b) & _MASK, b, c
    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d)))


class Md5(BlockHasher):
    """MD5 hasher state."""

    name = "md5"
    block_size = 64
    digest_size = 16

    def _reset_state(self) -> None:
        self._state = _IV

    def _compress(self, block: bytes) -> None:
        self._state = compress_block(self._state, block)

    def _finalize(self, tail: bytes) -> bytes:
        padded = length_padding(self._bit_length, tail, self.block_size, "little")
        for block in _chunks(padded, self.block_size):
            self._compress(block)
        return struct.pack("<4I", *self._state)


def md5(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return Md5(data).digest()