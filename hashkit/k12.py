"""The KangarooTwelve extendable-output function."""

from __future__ import annotations

import struct

_MASK64 = (1 << 64) - 1
_LANES = struct.Struct("<25Q")

# Rate of the sponge in bytes (1344 bits).
_RATE = 1344 // 8
# Size of the leaves the input is cut into.
_CHUNK_SIZE = 8192
# Size of a chaining value produced from one leaf.
_CV_SIZE = 256 // 8

# (t + 1)(t + 2) / 2 mod 64 for t in 0..24.
RHO: tuple[int, ...] = (
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14, 27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
)
PI: tuple[int, ...] = (
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4, 15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
)


def _keccak_round_constants() -> tuple[int, ...]:
    """All 24 Keccak-f[1600] round constants, generated by the standard LFSR."""
    lfsr = 1
    constants = []
    for _ in range(24):
        rc = 0
        for j in range(7):
            if lfsr & 1:
                rc |= 1 << ((1 << j) - 1)
            lfsr = ((lfsr << 1) ^ (0x71 if lfsr & 0x80 else 0)) & 0xFF
        constants.append(rc)
    return tuple(constants)


# The twelve-round permutation uses the last twelve constants.
RC: tuple[int, ...] = _keccak_round_constants()[12:]


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _permute_lanes(a: list[int]) -> None:
    """Apply Keccak-p[1600, 12] to 25 lanes in place."""
    for rc in RC:
        # theta
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x + 4) % 5] ^ _rotl(c[(x + 1) % 5], 1) for x in range(5)]
        for i in range(25):
            a[i] ^= d[i % 5]

        # rho and pi
        current = a[1]
        for pi, rho in zip(PI, RHO):
            current, a[pi] = a[pi], _rotl(current, rho)

        # chi
        for y in range(0, 25, 5):
            row = a[y:y + 5]
            a[y:y + 5] = [row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5]) for x in range(5)]

        # iota
        a[0] ^= rc


def keccak_p1600_12(lanes: list[int] | tuple[int, ...]) -> list[int]:
    """Return the result of the 12-round Keccak permutation on 25 64-bit lanes.

    Lane ``x + 5 * y`` holds the word at column ``x``, row ``y``.
    """
    state = [int(v) for v in lanes]
    if len(state) != 25:
        raise ValueError(f"the Keccak state has 25 lanes, got {len(state)}")
    if any(not 0 <= v <= _MASK64 for v in state):
        raise ValueError("lanes must be 64-bit unsigned integers")
    _permute_lanes(state)
    return state


def _permute(state: bytearray) -> None:
    lanes = list(_LANES.unpack(state))
    _permute_lanes(lanes)
    _LANES.pack_into(state, 0, *lanes)


def _xor_into(state: bytearray, data: bytes) -> None:
    size = len(data)
    if size:
        mixed = int.from_bytes(state[:size], "little") ^ int.from_bytes(data, "little")
        state[:size] = mixed.to_bytes(size, "little")


def _sponge(data: bytes, suffix: int, output_len: int) -> bytes:
    """TurboSHAKE-style sponge with a domain-separation ``suffix`` byte."""
    state = bytearray(200)

    block_size = min(len(data), _RATE)
    state[:block_size] = data[:block_size]
    offset = block_size
    while offset < len(data):
        _permute(state)
        block_size = min(len(data) - offset, _RATE)
        _xor_into(state, data[offset:offset + block_size])
        offset += block_size
    if block_size == _RATE:
        _permute(state)
        block_size = 0

    state[block_size] ^= suffix
    if suffix & 0x80 and block_size == _RATE - 1:
        _permute(state)
    state[_RATE - 1] ^= 0x80
    _permute(state)

    output = bytearray()
    remaining = output_len
    while remaining > 0:
        take = min(remaining, _RATE)
        output += state[:take]
        remaining -= take
        if remaining > 0:
            _permute(state)
    return bytes(output)


def right_encode(x: int) -> bytes:
    """Encode ``x`` big-endian with no leading zeros, followed by its byte count."""
    if x < 0:
        raise ValueError("right_encode takes a non-negative integer")
    encoded = x.to_bytes((x.bit_length() + 7) // 8, "big")
    return encoded + bytes([len(encoded)])


class Reader:
    """Output reader of a finalized KangarooTwelve computation.

    The output can be read only once.
    """

    def __init__(self, buffer: bytes = b"", customization: bytes = b"") -> None:
        self._buffer = bytes(buffer)
        self._customization = bytes(customization)
        self._finished = False

    def read(self, length: int) -> bytes:
        """Return ``length`` bytes of output."""
        if self._finished:
            raise RuntimeError("KangarooTwelve output can only be read once")
        if length < 0:
            raise ValueError("output length must be non-negative")

        message = self._buffer + self._customization + right_encode(len(self._customization))
        chunks = [message[i:i + _CHUNK_SIZE] for i in range(0, len(message), _CHUNK_SIZE)]

        if len(chunks) == 1:
            result = _sponge(chunks[0], 0x07, length)
        else:
            node = bytearray(chunks[0])
            node += b"\x03" + bytes(7)
            for chunk in chunks[1:]:
                node += _sponge(chunk, 0x0B, _CV_SIZE)
            node += right_encode(len(chunks) - 1)
            node += b"\xff\xff"
            result = _sponge(bytes(node), 0x06, length)

        self._finished = True
        return result

    def __repr__(self) -> str:
        return "<KangarooTwelve reader>"


class KangarooTwelve:
    """The KangarooTwelve extendable-output function."""

    name = "KangarooTwelve"

    def __init__(self, data: bytes = b"", customization: bytes = b"") -> None:
        self._buffer = bytearray()
        self._customization = bytes(customization)
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        self._buffer += memoryview(data).cast("B")

    def reset(self) -> None:
        """Discard absorbed input; the customization string is kept."""
        self._buffer.clear()

    def finalize_xof(self) -> Reader:
        """Return a reader over the output for the input absorbed so far."""
        return Reader(bytes(self._buffer), self._customization)

    def finalize_xof_reset(self) -> Reader:
        """Return a reader and clear both the input and the customization string."""
        reader = Reader(bytes(self._buffer), self._customization)
        self._buffer = bytearray()
        self._customization = b""
        return reader

    def digest(self, length: int) -> bytes:
        """Return ``length`` bytes of output, leaving the state intact."""
        return self.finalize_xof().read(length)

    def hexdigest(self, length: int) -> str:
        return self.digest(length).hex()

    def __repr__(self) -> str:
        return "<KangarooTwelve hasher>"