"""BLAKE2b and BLAKE2s hashers, with variable output and keyed (MAC) modes."""

from __future__ import annotations

import copy

from .blake2_compress import Blake2Variant, compress, words_to_bytes


class InvalidOutputSize(ValueError):
    """The requested digest size is not supported."""


class InvalidLength(ValueError):
    """A key, salt or personalisation string is too long."""


def _pack_two_words(variant: Blake2Variant, data: bytes) -> tuple[int, int]:
    padded = bytes(data).ljust(variant.salt_size, b"\0")
    half = variant.salt_size // 2
    return (
        int.from_bytes(padded[:half], "little"),
        int.from_bytes(padded[half:], "little"),
    )


def parameter_block(
    variant: Blake2Variant,
    salt: bytes,
    persona: bytes,
    key_size: int,
    output_size: int,
) -> tuple[int, ...]:
    """Build the eight-word sequential-mode parameter block."""
    if not 0 <= key_size <= variant.max_output_size:
        raise InvalidLength(
            f"key size must be at most {variant.max_output_size} bytes, got {key_size}"
        )
    if not 0 <= output_size <= variant.max_output_size:
        raise InvalidOutputSize(
            f"output size must be at most {variant.max_output_size} bytes, got {output_size}"
        )
    if len(salt) > variant.salt_size:
        raise InvalidLength(f"salt must be at most {variant.salt_size} bytes")
    if len(persona) > variant.salt_size:
        raise InvalidLength(f"personalisation must be at most {variant.salt_size} bytes")

    first = 0x0101_0000 ^ (key_size << 8) ^ output_size
    return (first, 0, 0, 0, *_pack_two_words(variant, salt), *_pack_two_words(variant, persona))


class Blake2Hasher:
    """Shared streaming logic: a lazy buffer that keeps the last block for finalization."""

    variant: Blake2Variant = Blake2Variant.BLAKE2B

    def _setup(
        self,
        digest_size: int,
        salt: bytes,
        persona: bytes,
        key_size: int,
        output_size: int,
        initial_buffer: bytes,
    ) -> None:
        params = parameter_block(self.variant, salt, persona, key_size, output_size)
        self._h0 = tuple(iv ^ p for iv, p in zip(self.variant.iv, params))
        self._initial_buffer = bytes(initial_buffer)
        self.digest_size = digest_size
        self.reset()

    @property
    def name(self) -> str:
        return self.variant.algorithm_name.lower()

    @property
    def block_size(self) -> int:
        return self.variant.block_size

    def reset(self) -> None:
        """Return the hasher to the state it had right after construction."""
        self._h = self._h0
        self._counter = 0
        self._buffer = bytearray(self._initial_buffer)

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        self._buffer += memoryview(data).cast("B")
        bs = self.variant.block_size
        if len(self._buffer) <= bs:
            return
        # Keep the final (possibly full) block so it can carry the last-block flag.
        ready = (len(self._buffer) - 1) // bs * bs
        for start in range(0, ready, bs):
            self._counter += bs
            self._h = compress(self.variant, self._h, bytes(self._buffer[start:start + bs]), self._counter)
        del self._buffer[:ready]

    def digest(self) -> bytes:
        """Return the digest of everything absorbed so far, leaving the state intact."""
        tail = bytes(self._buffer)
        counter = self._counter + len(tail)
        block = tail.ljust(self.variant.block_size, b"\0")
        h = compress(self.variant, self._h, block, counter, self.variant.mask, 0)
        return words_to_bytes(self.variant, h)[: self.digest_size]

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> Blake2Hasher:
        """Return an independent clone of the hasher."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} hasher, {self.digest_size}-byte digest>"


class _Blake2Unkeyed(Blake2Hasher):
    def __init__(self, data: bytes = b"", digest_size: int | None = None) -> None:
        if digest_size is None:
            digest_size = self.variant.max_output_size
        if not 0 <= digest_size <= self.variant.max_output_size:
            raise InvalidOutputSize(
                f"{self.variant.algorithm_name} digest size must be at most "
                f"{self.variant.max_output_size} bytes, got {digest_size}"
            )
        self._setup(digest_size, b"", b"", 0, digest_size, b"")
        if data:
            self.update(data)


class Blake2b(_Blake2Unkeyed):
    """BLAKE2b with an output size of up to 64 bytes, chosen at construction."""

    variant = Blake2Variant.BLAKE2B

    def __init__(self, data: bytes = b"", digest_size: int = 64) -> None:
        super().__init__(data, digest_size)


class Blake2s(_Blake2Unkeyed):
    """BLAKE2s with an output size of up to 32 bytes, chosen at construction."""

    variant = Blake2Variant.BLAKE2S

    def __init__(self, data: bytes = b"", digest_size: int = 32) -> None:
        super().__init__(data, digest_size)


class _Blake2Mac(Blake2Hasher):
    def __init__(
        self,
        key: bytes,
        salt: bytes = b"",
        persona: bytes = b"",
        digest_size: int | None = None,
    ) -> None:
        variant = self.variant
        if digest_size is None:
            digest_size = variant.max_output_size
        if not 1 <= digest_size <= variant.max_output_size:
            raise InvalidOutputSize(
                f"MAC size must be between 1 and {variant.max_output_size} bytes, got {digest_size}"
            )
        key = bytes(key)
        if len(key) > variant.max_output_size:
            raise InvalidLength(f"key must be at most {variant.max_output_size} bytes")
        if len(salt) > variant.salt_size or len(persona) > variant.salt_size:
            raise InvalidLength(
                f"salt and personalisation must be at most {variant.salt_size} bytes"
            )
        key_block = key.ljust(variant.block_size, b"\0")
        self._setup(digest_size, bytes(salt), bytes(persona), len(key), digest_size, key_block)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}{self.digest_size} mac>"


class Blake2bMac(_Blake2Mac):
    """Keyed BLAKE2b with optional salt and personalisation."""

    variant = Blake2Variant.BLAKE2B

    def __init__(
        self, key: bytes, salt: bytes = b"", persona: bytes = b"", digest_size: int = 64
    ) -> None:
        super().__init__(key, salt, persona, digest_size)


class Blake2sMac(_Blake2Mac):
    """Keyed BLAKE2s with optional salt and personalisation."""

    variant = Blake2Variant.BLAKE2S

    def __init__(
        self, key: bytes, salt: bytes = b"", persona: bytes = b"", digest_size: int = 32
    ) -> None:
        super().__init__(key, salt, persona, digest_size)