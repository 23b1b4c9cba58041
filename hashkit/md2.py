"""The MD2 message digest."""

from __future__ import annotations

from .buffer import BlockHasher

# The MD2 substitution table, a permutation of 0..255 derived from the digits of pi.
_S = bytes.fromhex(
    "292e43c9a2d87c013d3654a1ecf00613"
    "62a705f3c0c7738c98932bd9bc4c82ca"
    "1e9b573cfdd4e01667426f188a17e512"
    "be4ec4d6da9ede49a0fbf58ebb2fee7a"
    "a968799115b2073f94c210890b225f21"
    "807f5d9a5a903227353ecce7bff79703"
    "ff1930b348a5b5d1d75e922aac56aac6"
    "4fb838d296a47db676fc6be29c7404f1"
    "459d705964718720865bcf65e62da802"
    "1b6025adaeb0b9f61c46616934407e0f"
    "5547a323dd51af3ac35cf9cebac5ea26"
    "2c530d6e85288409d3dfcdf441814d52"
    "6adc37c86cc1abfa24e17b080cbdb14a"
    "788895 8be363e86de9cbd5fe3b001d39".replace(" ", "")
    + "f2efb70e6658d0e4a67772f8eb754b0a"
    "314450b48fed1f1adb998d339f118314"
)


class Md2(BlockHasher):
    """MD2 hasher state."""

    name = "md2"
    block_size = 16
    digest_size = 16

    def _reset_state(self) -> None:
        self._x = bytearray(48)
        self._checksum = bytearray(16)

    def _compress(self, block: bytes) -> None:
        x = self._x
        x[16:32] = block
        x[32:48] = bytes(a ^ b for a, b in zip(block, x[:16]))

        t = 0
        for round_index in range(18):
            for k in range(48):
                x[k] ^= _S[t]
                t = x[k]
            t = (t + round_index) & 0xFF

        checksum = self._checksum
        last = checksum[15]
        for j, byte in enumerate(block):
            checksum[j] ^= _S[byte ^ last]
            last = checksum[j]

    def _finalize(self, tail: bytes) -> bytes:
        remaining = self.block_size - len(tail)
        self._compress(tail + bytes([remaining]) * remaining)
        self._compress(bytes(self._checksum))
        return bytes(self._x[:16])


def md2(data: bytes) -> bytes:
    """Return the MD2 digest of ``data``."""
    return Md2(data).digest()