"""The BLAKE2b and BLAKE2s compression function and its constants."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_U64_LIMIT = 1 << 64

SIGMA: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
)

BLAKE2B_IV: tuple[int, ...] = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

BLAKE2S_IV: tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

# (a, b, c, d, message slot x, message slot y): four column steps, then four diagonal steps.
_G_SCHEDULE = (
    (0, 4, 8, 12, 0, 1),
    (1, 5, 9, 13, 2, 3),
    (2, 6, 10, 14, 4, 5),
    (3, 7, 11, 15, 6, 7),
    (0, 5, 10, 15, 8, 9),
    (1, 6, 11, 12, 10, 11),
    (2, 7, 8, 13, 12, 13),
    (3, 4, 9, 14, 14, 15),
)


@dataclass(frozen=True)
class _Spec:
    algorithm_name: str
    word_bits: int
    block_size: int
    rounds: int
    rotations: tuple[int, int, int, int]
    iv: tuple[int, ...]
    struct_code: str


class Blake2Variant(enum.Enum):
    """The two BLAKE2 flavours: 64-bit words (b) and 32-bit words (s)."""

    BLAKE2B = _Spec("Blake2b", 64, 128, 12, (32, 24, 16, 63), BLAKE2B_IV, "Q")
    BLAKE2S = _Spec("Blake2s", 32, 64, 10, (16, 12, 8, 7), BLAKE2S_IV, "I")

    @property
    def algorithm_name(self) -> str:
        return self.value.algorithm_name

    @property
    def word_bits(self) -> int:
        return self.value.word_bits

    @property
    def word_bytes(self) -> int:
        return self.value.word_bits // 8

    @property
    def mask(self) -> int:
        return (1 << self.value.word_bits) - 1

    @property
    def block_size(self) -> int:
        return self.value.block_size

    @property
    def max_output_size(self) -> int:
        """Largest digest size, which is also the largest key size."""
        return self.value.word_bits

    @property
    def salt_size(self) -> int:
        """Length of the salt and of the personalisation string."""
        return self.value.word_bits // 4

    @property
    def rounds(self) -> int:
        return self.value.rounds

    @property
    def rotations(self) -> tuple[int, int, int, int]:
        return self.value.rotations

    @property
    def iv(self) -> tuple[int, ...]:
        return self.value.iv

    def struct_format(self, count: int) -> str:
        """Little-endian struct format for ``count`` words."""
        return f"<{count}{self.value.struct_code}"


def rotate_right(value: int, n: int, bits: int) -> int:
    """Rotate a ``bits``-wide word right by ``n`` positions."""
    if bits <= 0:
        raise ValueError("word width must be positive")
    if not 0 <= n < bits:
        raise ValueError(f"rotation must be in [0, {bits}), got {n}")
    mask = (1 << bits) - 1
    if not 0 <= value <= mask:
        raise ValueError(f"value does not fit in {bits} bits")
    return ((value >> n) | (value << (bits - n))) & mask


def _check_word(variant: Blake2Variant, word: int, what: str) -> int:
    if not 0 <= word <= variant.mask:
        raise ValueError(f"{what} does not fit in a {variant.word_bits}-bit word")
    return word


def compress(
    variant: Blake2Variant,
    h: Sequence[int],
    block: bytes,
    counter: int = 0,
    f0: int = 0,
    f1: int = 0,
) -> tuple[int, ...]:
    """Compress one block into the chaining value ``h`` and return the new value.

    ``counter`` is the number of message bytes processed so far, including this
    block; ``f0`` and ``f1`` are the finalization flags.
    """
    state = tuple(_check_word(variant, word, "chaining word") for word in h)
    if len(state) != 8:
        raise ValueError(f"chaining value must have 8 words, got {len(state)}")
    block = bytes(block)
    if len(block) != variant.block_size:
        raise ValueError(
            f"{variant.algorithm_name} blocks are {variant.block_size} bytes, got {len(block)}"
        )
    if not 0 <= counter < _U64_LIMIT:
        raise ValueError("counter must fit in 64 bits")
    _check_word(variant, f0, "f0")
    _check_word(variant, f1, "f1")

    bits = variant.word_bits
    mask = variant.mask
    iv = variant.iv
    r1, r2, r3, r4 = variant.rotations
    m = struct.unpack(variant.struct_format(16), block)

    t0 = counter & mask
    t1 = (counter >> bits) & mask
    v = [*state, *iv[:4], iv[4] ^ t0, iv[5] ^ t1, iv[6] ^ f0, iv[7] ^ f1]

    def rotr(x: int, n: int) -> int:
        return ((x >> n) | (x << (bits - n))) & mask

    for sigma in SIGMA[: variant.rounds]:
        for a, b, c, d, xi, yi in _G_SCHEDULE:
            va, vb, vc, vd = v[a], v[b], v[c], v[d]
            va = (va + vb + m[sigma[xi]]) & mask
            vd = rotr(vd ^ va, r1)
            vc = (vc + vd) & mask
            vb = rotr(vb ^ vc, r2)
            va = (va + vb + m[sigma[yi]]) & mask
            vd = rotr(vd ^ va, r3)
            vc = (vc + vd) & mask
            vb = rotr(vb ^ vc, r4)
            v[a], v[b], v[c], v[d] = va, vb, vc, vd

    return tuple(word ^ low ^ high for word, low, high in zip(state, v[:8], v[8:]))


def words_to_bytes(variant: Blake2Variant, words: Iterable[int]) -> bytes:
    """Serialise words in little-endian order."""
    checked = [_check_word(variant, word, "word") for word in words]
    return struct.pack(variant.struct_format(len(checked)), *checked)