import pytest

from hashkit.gost94 import (
    CRYPTO_PRO,
    GOST28147_UA,
    S2015,
    TEST,
    Gost94,
    Gost94Params,
    gost94,
)

FOX = b"The quick brown fox jumps over the lazy dog"


def test_cryptopro_fox():
    h = Gost94(params=CRYPTO_PRO)
    h.update(FOX)
    assert h.hexdigest() == "9004294a361a508c586fe53d1f1b02746765e71b765472786e4770d565830a76"


def test_test_params_empty():
    assert gost94(b"", TEST).hex() == (
        "ce85b99cc46752fffee35cab9a7b0278abb4c2d2055cff685af4912c49490f8d"
    )


def test_test_params_fox():
    assert gost94(FOX, TEST).hex() == (
        "77b7fa410c9ac58a25f49bca7d0468c9296529315eaca76bd1a10f376d1f4294"
    )


def test_cryptopro_empty():
    assert gost94(b"").hex() == (
        "981e5f3ca30c841487830f84fb433e13ac1101569b9c13584ac483234cd656c0"
    )


def test_gost_engine_vectors():
    h = Gost94(params=CRYPTO_PRO)
    for _ in range(128):
        h.update(b"12345670")
    assert h.hexdigest() == "f7fc6d16a6a5c12ac4f7d320e0fd0d8354908699125e09727a4ef929122b1cae"
    h.reset()

    for _ in range(128):
        h.update(b"\x00\x01\x02\x15\x84\x67\x45\x31")
    assert h.hexdigest() == "69f529aa82d9344ab0fa550cdf4a70ecfd92a38b5520b1906329763e09105196"
    h.reset()

    buf = b"12345670" * 128
    h.update(buf[:539])
    assert h.hexdigest() == "bd5f1e4b539c7b00f0866afdbc8ed452503a18436061747a343f43efe888aac9"
    h.reset()

    for _ in range(4096):
        for _ in range(7):
            h.update(b"121345678")
        h.update(b"1234567\n")
    h.update(b"12345\n")
    assert h.hexdigest() == "e5d3ac4ea3f67896c51ff919cedb9405ad771e39f0f2eab103624f9a758e506f"


def test_gost_ua_engine_vector():
    h = Gost94(params=GOST28147_UA)
    h.update(b"test")
    assert h.hexdigest() == "7c536414f8b5b9cc649fdf3cccb2685c1a12622956308e34f31c50ed7b3af56c"


@pytest.mark.parametrize("params", [CRYPTO_PRO, S2015, TEST, GOST28147_UA])
def test_incremental_matches_one_shot(params):
    data = bytes(range(256)) * 3
    h = Gost94(params=params)
    for start in range(0, len(data), 37):
        h.update(data[start:start + 37])
    assert h.digest() == gost94(data, params)


def test_digest_does_not_consume_state():
    h = Gost94(b"hello ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"world")
    assert h.digest() == gost94(b"hello world")


def test_copy_is_independent():
    h = Gost94(b"abc", TEST)
    clone = h.copy()
    clone.update(b"def")
    assert h.digest() == gost94(b"abc", TEST)
    assert clone.digest() == gost94(b"abcdef", TEST)


def test_reset_returns_to_initial_state():
    h = Gost94(FOX, TEST)
    h.reset()
    assert h.digest() == gost94(b"", TEST)


def test_parameter_sets_differ():
    digests = {gost94(FOX, p) for p in (CRYPTO_PRO, S2015, TEST, GOST28147_UA)}
    assert len(digests) == 4


def test_digest_size_and_name():
    h = Gost94(params=GOST28147_UA)
    assert len(h.digest()) == 32
    assert h.name == "Gost28147UA"


def test_block_boundary_lengths_distinct():
    results = {gost94(b"\x00" * n, TEST) for n in (0, 31, 32, 33, 64)}
    assert len(results) == 5


def test_params_reject_bad_sbox_shape():
    with pytest.raises(ValueError):
        Gost94Params("bad", TEST.s_box[:7])


def test_params_reject_bad_sbox_value():
    rows = list(TEST.s_box)
    rows[0] = (16,) + rows[0][1:]
    with pytest.raises(ValueError):
        Gost94Params("bad", tuple(rows))


def test_params_reject_bad_h0():
    with pytest.raises(ValueError):
        Gost94Params("bad", TEST.s_box, bytes(31))


def test_custom_h0_changes_digest():
    custom = Gost94Params("custom", TEST.s_box, bytes([1]) * 32)
    assert gost94(FOX, custom) != gost94(FOX, TEST)
    assert gost94(FOX, custom) == Gost94(FOX, custom).digest()