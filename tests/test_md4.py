import pytest

from hashkit.md4 import Md4, md4


def test_hello_world():
    h = Md4()
    h.update(b"hello world")
    assert h.digest() == bytes.fromhex("aa010fbc1d14c795d86ef98c95479d17")


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", "31d6cfe0d16ae931b73c59d7e0c089c0"),
        (b"a", "bde52cb31de33e46245e05fbdbd6fb24"),
        (b"abc", "a448017aaf21d8525fc10ae87aa6729d"),
        (b"message digest", "d9130a8164549fe818874806e1c7014b"),
        (b"abcdefghijklmnopqrstuvwxyz", "d79e1c308aa5bbcdeea8ed63df412da9"),
    ],
)
def test_known_vectors(data, expected):
    assert md4(data).hex() == expected


@pytest.mark.parametrize("length", [55, 56, 63, 64, 65, 127, 128, 129])
def test_incremental_matches_one_shot_around_block_edges(length):
    data = bytes(i % 251 for i in range(length))
    h = Md4()
    for byte in data:
        h.update(bytes([byte]))
    assert h.digest() == md4(data)


def test_copy_and_reset():
    h = Md4(b"hello ")
    clone = h.copy()
    clone.update(b"world")
    assert clone.hexdigest() == "aa010fbc1d14c795d86ef98c95479d17"
    h.reset()
    assert h.hexdigest() == "31d6cfe0d16ae931b73c59d7e0c089c0"