"""Pure-Python cryptographic hash functions: MD2, MD4, MD5, BLAKE2, GOST R 34.11-94 and KangarooTwelve."""

__version__ = "0.1.0"