# hashkit

Pure-Python implementations of several cryptographic hash functions, with no
dependencies beyond the standard library:

- MD2, MD4 and MD5 (`hashkit.md2`, `hashkit.md4`, `hashkit.md5`)
- BLAKE2b and BLAKE2s with variable output size, plus keyed (MAC) modes with
  salt and personalisation (`hashkit.blake2`, `hashkit.blake2_compress`)
- GOST R 34.11-94 with the CryptoPro, test, GOST R 34.12-2015 and UA
  parameter sets (`hashkit.gost94`)
- KangarooTwelve, an extendable-output function (`hashkit.k12`)

These are meant for interoperability, testing and study. They are slow compared
with native code, and MD2, MD4 and MD5 are broken and must not be used where
security matters.

## Installation

```
pip install hashkit
```

## Usage

The hasher classes work like those in `hashlib`. Each one takes optional
initial data and provides `update`, `digest`, `hexdigest`, `copy` and `reset`.
`digest` does not disturb the state, so more data can be absorbed afterwards.

```python
from hashkit.md5 import Md5, md5

h = Md5()
h.update(b"hello ")
h.update(b"world")
print(h.hexdigest())  # 5eb63bbbe01eeed093cb22bb8f5acdc3

print(md5(b"hello world").hex())
```

`hashkit.md2.md2` and `hashkit.md4.md4` are used the same way, as are the
`Md2` and `Md4` classes. `hashkit.md5.compress_block(state, block)` exposes the
raw MD5 compression function on a four-word state and a 64-byte block.

The shared streaming logic lives in `hashkit.buffer.BlockHasher`, an abstract
base class, and `hashkit.buffer.length_padding`, which pads a final partial
block with `0x80`, zeros and a 64-bit length in the given byte order.

### BLAKE2

```python
from hashkit.blake2 import Blake2b, Blake2s, Blake2bMac, Blake2sMac

Blake2b(b"hello world").hexdigest()               # 64-byte digest
Blake2s(b"hello world").hexdigest()               # 32-byte digest
Blake2b(b"my_input", digest_size=10).hexdigest()  # 2cc55c84e416924e6400

mac = Blake2sMac(bytes(range(32)), salt=b"", persona=b"personal")
mac.update(b"message")
tag = mac.digest()
```

- `Blake2b` accepts a `digest_size` from 0 to 64 bytes, `Blake2s` from 0 to 32.
- `Blake2bMac` and `Blake2sMac` accept a `digest_size` from 1 to 64 and 1 to 32
  bytes respectively. The key may be up to 64 bytes (BLAKE2b) or 32 bytes
  (BLAKE2s); the salt and persona up to 16 bytes (BLAKE2b) or 8 bytes (BLAKE2s).
- An output size out of range raises `InvalidOutputSize`; a key, salt or
  persona that is too long raises `InvalidLength`. Both are subclasses of
  `ValueError`.
- `reset()` on a MAC returns it to its keyed starting state.

`hashkit.blake2.parameter_block` builds the eight-word parameter block, and
`hashkit.blake2_compress` provides the compression function (`compress`), the
`Blake2Variant` enum, `rotate_right` and `words_to_bytes`.

### GOST R 34.11-94

```python
from hashkit.gost94 import Gost94, Gost94Params, gost94, CRYPTO_PRO, TEST

gost94(b"The quick brown fox jumps over the lazy dog", CRYPTO_PRO).hex()
# 9004294a361a508c586fe53d1f1b02746765e71b765472786e4770d565830a76

h = Gost94(params=TEST)
h.update(b"data")
h.digest()
```

The parameter sets `CRYPTO_PRO` (the default), `S2015`, `TEST` and
`GOST28147_UA` are module-level `Gost94Params` instances. A custom set can be
made with `Gost94Params(name, s_box, h0)`, where `s_box` is 8 rows of 16 four-bit
values and `h0` a 32-byte initial hash value.

### KangarooTwelve

```python
from hashkit.k12 import KangarooTwelve

k = KangarooTwelve(b"", customization=b"")
k.digest(32).hex()
# 1ac2d450fc3b4205d19da7bfca1b37513c0803577ac7167f06fe2ce1f0ef39e5

reader = KangarooTwelve(b"input").finalize_xof()
out = reader.read(64)
```

- `digest(length)` and `hexdigest(length)` return any number of output bytes
  without disturbing the state.
- `finalize_xof()` returns a `Reader`; `finalize_xof_reset()` does the same and
  clears both the absorbed input and the customization string.
- `reset()` discards the absorbed input but keeps the customization string.
- A `Reader` can be read only once; a second `read` raises `RuntimeError`.

The 12-round permutation is available as `keccak_p1600_12(lanes)`, and the
length encoding as `right_encode(x)`.

## Limitations

hashkit is a library only: it has no command-line tool. The hashers keep
everything in memory as Python integers and bytes, so large inputs are slow,
and KangarooTwelve holds all absorbed input until it is finalized.

## Running the tests

```
pip install -e ".[test]"
pytest
```