import pytest

from hashkit.md2 import Md2, md2


def test_hello_world():
    h = Md2()
    h.update(b"hello world")
    assert h.digest() == bytes.fromhex("d9cce882ee690a5c1ce70beff3a78c77")


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", "8350e5a3e24c153df2275c9f80692773"),
        (b"a", "32ec01ec4a6dac72c0ab96fb34c0b5d1"),
        (b"abc", "da853b0d3f88d99b30283a69e6ded6bb"),
        (b"message digest", "ab4f496bfb2a530b219ff33031fe06b0"),
    ],
)
def test_known_vectors(data, expected):
    assert md2(data).hex() == expected


def test_digest_size():
    assert len(md2(b"x" * 100)) == Md2.digest_size == 16


@pytest.mark.parametrize("split", [1, 5, 16, 17])
def test_incremental_matches_one_shot(split):
    data = bytes(range(200))
    h = Md2()
    for start in range(0, len(data), split):
        h.update(data[start:start + split])
    assert h.digest() == md2(data)


def test_reset_after_finalize():
    h = Md2(b"some input")
    h.digest()
    h.reset()
    h.update(b"hello world")
    assert h.hexdigest() == "d9cce882ee690a5c1ce70beff3a78c77"