"""The GOST R 34.11-94 hash function with selectable S-box parameters."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import lru_cache

from .buffer import BlockHasher

_MASK32 = 0xFFFFFFFF
_MASK256 = (1 << 256) - 1

_C = bytes([
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0x00, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0xFF,
])

# Output byte j of the P transform takes input byte _P_PERM[j].
_P_PERM = tuple(8 * (j % 4) + j // 4 for j in range(32))


@dataclass(frozen=True)
class Gost94Params:
    """An S-box, an initial hash value and the name of the resulting algorithm."""

    name: str
    s_box: tuple[tuple[int, ...], ...]
    h0: bytes = bytes(32)

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.s_box)
        if len(rows) != 8 or any(len(row) != 16 for row in rows):
            raise ValueError("the S-box must have 8 rows of 16 entries")
        if any(not 0 <= value <= 15 for row in rows for value in row):
            raise ValueError("S-box entries must be 4-bit values")
        h0 = bytes(self.h0)
        if len(h0) != 32:
            raise ValueError(f"the initial hash value must be 32 bytes, got {len(h0)}")
        object.__setattr__(self, "s_box", rows)
        object.__setattr__(self, "h0", h0)


CRYPTO_PRO = Gost94Params(
    "Gost94CryptoPro",
    (
        (10, 4, 5, 6, 8, 1, 3, 7, 13, 12, 14, 0, 9, 2, 11, 15),
        (5, 15, 4, 0, 2, 13, 11, 9, 1, 7, 6, 3, 12, 14, 10, 8),
        (7, 15, 12, 14, 9, 4, 1, 0, 3, 11, 5, 2, 6, 10, 8, 13),
        (4, 10, 7, 12, 0, 15, 2, 8, 14, 1, 6, 5, 13, 11, 9, 3),
        (7, 6, 4, 11, 9, 12, 2, 10, 1, 8, 0, 14, 15, 13, 3, 5),
        (7, 6, 2, 4, 13, 9, 15, 0, 10, 1, 5, 11, 8, 14, 12, 3),
        (13, 14, 4, 1, 7, 0, 5, 10, 3, 12, 8, 15, 6, 2, 9, 11),
        (1, 3, 10, 9, 5, 11, 4, 15, 8, 6, 7, 14, 13, 0, 2, 12),
    ),
)

S2015 = Gost94Params(
    "Gost94s2015",
    (
        (12, 4, 6, 2, 10, 5, 11, 9, 14, 8, 13, 7, 0, 3, 15, 1),
        (6, 8, 2, 3, 9, 10, 5, 12, 1, 14, 4, 7, 11, 13, 0, 15),
        (11, 3, 5, 8, 2, 15, 10, 13, 14, 1, 7, 4, 12, 9, 6, 0),
        (12, 8, 2, 1, 13, 4, 15, 6, 7, 0, 10, 5, 3, 14, 9, 11),
        (7, 15, 5, 10, 8, 1, 6, 13, 0, 9, 3, 14, 11, 4, 2, 12),
        (5, 13, 15, 6, 9, 2, 12, 10, 11, 7, 8, 1, 4, 3, 14, 0),
        (8, 14, 2, 5, 6, 9, 1, 12, 15, 4, 11, 0, 13, 10, 3, 7),
        (1, 7, 14, 13, 0, 5, 8, 3, 4, 15, 10, 6, 9, 12, 11, 2),
    ),
)

TEST = Gost94Params(
    "Gost94Test",
    (
        (4, 10, 9, 2, 13, 8, 0, 14, 6, 11, 1, 12, 7, 15, 5, 3),
        (14, 11, 4, 12, 6, 13, 15, 10, 2, 3, 8, 1, 0, 7, 5, 9),
        (5, 8, 1, 13, 10, 3, 4, 2, 14, 15, 12, 7, 6, 0, 9, 11),
        (7, 13, 10, 1, 0, 8, 9, 15, 14, 4, 6, 12, 11, 2, 5, 3),
        (6, 12, 7, 1, 5, 15, 13, 8, 4, 10, 9, 14, 0, 3, 11, 2),
        (4, 11, 10, 0, 7, 2, 1, 13, 3, 6, 8, 5, 9, 12, 15, 14),
        (13, 11, 4, 1, 3, 15, 5, 9, 0, 10, 14, 7, 6, 8, 2, 12),
        (1, 15, 13, 0, 5, 7, 10, 4, 9, 2, 3, 14, 6, 11, 8, 12),
    ),
)

GOST28147_UA = Gost94Params(
    "Gost28147UA",
    (
        (10, 9, 13, 6, 14, 11, 4, 5, 15, 1, 3, 12, 7, 0, 8, 2),
        (8, 0, 12, 4, 9, 6, 7, 11, 2, 3, 1, 15, 5, 14, 10, 13),
        (15, 6, 5, 8, 14, 11, 10, 4, 12, 0, 3, 7, 2, 9, 1, 13),
        (3, 8, 13, 9, 6, 11, 15, 0, 2, 5, 12, 10, 4, 14, 1, 7),
        (15, 8, 14, 9, 7, 2, 0, 13, 12, 6, 1, 5, 11, 4, 3, 10),
        (2, 8, 9, 7, 5, 15, 0, 11, 12, 1, 13, 14, 10, 3, 6, 4),
        (3, 8, 11, 5, 6, 4, 14, 10, 2, 12, 1, 7, 9, 15, 13, 0),
        (1, 2, 3, 14, 6, 13, 11, 8, 15, 10, 12, 5, 7, 9, 0, 4),
    ),
)


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


@lru_cache(maxsize=None)
def _round_tables(s_box: tuple[tuple[int, ...], ...]) -> tuple[tuple[int, ...], ...]:
    """Byte-indexed tables combining two S-box rows and the 11-bit rotation."""
    tables = []
    for j in range(4):
        low_row, high_row = s_box[2 * j], s_box[2 * j + 1]
        tables.append(tuple(
            _rotl32((low_row[byte & 0xF] | high_row[byte >> 4] << 4) << (8 * j), 11)
            for byte in range(256)
        ))
    return tuple(tables)


def _encrypt(half: bytes, key: bytes, tables: tuple[tuple[int, ...], ...]) -> bytes:
    """Encrypt an 8-byte half-block with the GOST 28147-89 block cipher."""
    t0, t1, t2, t3 = tables
    k = struct.unpack("<8I", key)
    a, b = struct.unpack("<2I", half)
    for subkey in k * 3 + k[::-1]:
        x = (a + subkey) & _MASK32
        a, b = b ^ (t0[x & 0xFF] | t1[(x >> 8) & 0xFF] | t2[(x >> 16) & 0xFF] | t3[x >> 24]), a
    return struct.pack("<2I", b, a)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _a(x: bytes) -> bytes:
    return x[8:] + _xor(x[:8], x[8:16])


def _p(y: bytes) -> bytes:
    return bytes(y[i] for i in _P_PERM)


def _psi(b: bytes) -> bytes:
    low = b[0] ^ b[2] ^ b[4] ^ b[6] ^ b[24] ^ b[30]
    high = b[1] ^ b[3] ^ b[5] ^ b[7] ^ b[25] ^ b[31]
    return b[2:] + bytes((low, high))


def _psi_times(b: bytes, count: int) -> bytes:
    for _ in range(count):
        b = _psi(b)
    return b


def _step(h: bytes, m: bytes, tables: tuple[tuple[int, ...], ...]) -> bytes:
    """The step hash function: key generation, encryption and shuffling."""
    keys = [_p(_xor(h, m))]
    u = _a(h)
    v = _a(_a(m))
    keys.append(_p(_xor(u, v)))
    u = _xor(_a(u), _C)
    v = _a(_a(v))
    keys.append(_p(_xor(u, v)))
    u = _a(u)
    v = _a(_a(v))
    keys.append(_p(_xor(u, v)))

    s = b"".join(_encrypt(h[8 * i:8 * i + 8], key, tables) for i, key in enumerate(keys))

    res = _psi(_xor(_psi_times(s, 12), m))
    return _psi_times(_xor(h, res), 61)


class Gost94(BlockHasher):
    """GOST R 34.11-94 hasher state."""

    block_size = 32
    digest_size = 32

    def __init__(self, data: bytes = b"", params: Gost94Params = CRYPTO_PRO) -> None:
        self.params = params
        self._tables = _round_tables(params.s_box)
        super().__init__(data)

    @property
    def name(self) -> str:
        return self.params.name

    def _reset_state(self) -> None:
        self._h = self.params.h0
        self._sigma = 0

    def _compress(self, block: bytes) -> None:
        self._h = _step(self._h, block, self._tables)
        self._sigma = (self._sigma + int.from_bytes(block, "little")) & _MASK256

    def _finalize(self, tail: bytes) -> bytes:
        bit_len = ((self._blocks * self.block_size + len(tail)) * 8) & _MASK256
        if tail:
            self._compress(tail.ljust(self.block_size, b"\0"))
        self._h = _step(self._h, bit_len.to_bytes(32, "little"), self._tables)
        self._h = _step(self._h, self._sigma.to_bytes(32, "little"), self._tables)
        return self._h

    def __repr__(self) -> str:
        return f"<{self.params.name} hasher>"


def gost94(data: bytes, params: Gost94Params = CRYPTO_PRO) -> bytes:
    """Return the GOST R 34.11-94 digest of ``data`` under ``params``."""
    return Gost94(data, params).digest()