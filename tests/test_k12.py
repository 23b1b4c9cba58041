import pytest

from hashkit.k12 import KangarooTwelve, Reader, keccak_p1600_12, right_encode

EMPTY_64 = bytes.fromhex(
    "1ac2d450fc3b4205d19da7bfca1b37513c0803577ac7167f06fe2ce1f0ef39e5"
    "4269c056b8c82e48276038b6d292966cc07a3d4645272e31ff38508139eb0a71"
)


def digest_of(data: bytes, n: int) -> bytes:
    h = KangarooTwelve()
    h.update(data)
    return h.finalize_xof().read(n)


def pattern(length: int) -> bytes:
    return bytes(j % 251 for j in range(length))


def test_empty_32():
    assert digest_of(b"", 32) == EMPTY_64[:32]


def test_empty_64():
    assert digest_of(b"", 64) == EMPTY_64


def test_empty_long_output_tail():
    out = digest_of(b"", 10032)
    assert len(out) == 10032
    assert out[10000:] == bytes.fromhex(
        "e8dc563642f7228c84684c898405d3a834799158c079b12880277a1d28e2ff6d"
    )


PAT_M = [
    "2bda92450e8b147f8a7cb629e784a058efca7cf7d8218e02d345dfaa65244a1f",
    "6bf75fa2239198db4772e36478f8e19b0f371205f6a9a93a273f51df37122888",
    "0c315ebcdedbf61426de7dcf8fb725d1e74675d7f5327a5067f367b108ecb67c",
    "cb552e2ec77d9910701d578b457ddf772c12e322e4ee7fe417f92c758f0d59d0",
    "8701045e22205345ff4dda05555cbb5c3af1a771c2b89baef37db43d9998b9fe",
]


@pytest.mark.parametrize("i, expected", list(enumerate(PAT_M)))
def test_pat_m(i, expected):
    assert digest_of(pattern(17 ** i), 32) == bytes.fromhex(expected)


PAT_C = [
    "fab658db63e94a246188bf7af69a133045f46ee984c56e3c3328caaf1aa1a583",
    "d848c5068ced736f4462159b9867fd4c20b808acc3d5bc48e0b06ba0a3762ec4",
    "c389e5009ae57120854c2e8c64670ac01358cf4c1baf89447a724234dc7ced74",
    "75d2f86a2e644566726b4fbcfc5657b9dbcf070c7b0dca06450ab291d7443bcf",
]


@pytest.mark.parametrize("i, expected", list(enumerate(PAT_C)))
def test_pat_c(i, expected):
    m = b"\xff" * (2 ** i - 1)
    c = pattern(41 ** i)
    h = KangarooTwelve(customization=c)
    h.update(m)
    assert h.finalize_xof().read(32) == bytes.fromhex(expected)


def test_constructor_data_matches_update():
    assert KangarooTwelve(pattern(17)).digest(32) == bytes.fromhex(PAT_M[1])


def test_incremental_updates_match_one_shot():
    data = pattern(289)
    h = KangarooTwelve()
    for start in range(0, len(data), 50):
        h.update(data[start:start + 50])
    assert h.digest(32) == bytes.fromhex(PAT_M[2])


def test_digest_leaves_state_intact():
    h = KangarooTwelve(b"abc")
    first = h.digest(16)
    assert h.digest(16) == first
    assert h.hexdigest(16) == first.hex()


def test_reader_reads_only_once():
    reader = KangarooTwelve().finalize_xof()
    assert reader.read(32) == EMPTY_64[:32]
    with pytest.raises(RuntimeError):
        reader.read(32)


def test_reader_rejects_negative_length():
    with pytest.raises(ValueError):
        Reader().read(-1)


def test_reader_direct_construction():
    assert Reader(b"", b"").read(64) == EMPTY_64


def test_reset_clears_input():
    h = KangarooTwelve(b"some input")
    h.reset()
    assert h.digest(32) == EMPTY_64[:32]


def test_reset_keeps_customization():
    c = pattern(41)
    h = KangarooTwelve(b"\xff", customization=c)
    h.reset()
    h.update(b"\xff")
    assert h.digest(32) == bytes.fromhex(PAT_C[1])


def test_finalize_xof_reset_clears_input_and_customization():
    h = KangarooTwelve(b"\xff", customization=pattern(41))
    assert h.finalize_xof_reset().read(32) == bytes.fromhex(PAT_C[1])
    assert h.digest(32) == EMPTY_64[:32]


def test_zero_length_output():
    assert KangarooTwelve(b"abc").digest(0) == b""


@pytest.mark.parametrize(
    "value, encoded",
    [
        (0, b"\x00"),
        (1, b"\x01\x01"),
        (255, b"\xff\x01"),
        (256, b"\x01\x00\x02"),
        (65536, b"\x01\x00\x00\x03"),
    ],
)
def test_right_encode(value, encoded):
    assert right_encode(value) == encoded


def test_right_encode_rejects_negative():
    with pytest.raises(ValueError):
        right_encode(-1)


def test_permutation_does_not_mutate_input():
    lanes = [0] * 25
    result = keccak_p1600_12(lanes)
    assert lanes == [0] * 25
    assert len(result) == 25
    assert any(result)


def test_permutation_is_deterministic_and_injective_on_samples():
    a = keccak_p1600_12([0] * 25)
    b = keccak_p1600_12([1] + [0] * 24)
    assert keccak_p1600_12([0] * 25) == a
    assert a != b
    assert all(0 <= v < 2 ** 64 for v in a + b)


def test_permutation_rejects_wrong_lane_count():
    with pytest.raises(ValueError):
        keccak_p1600_12([0] * 24)


def test_permutation_rejects_oversized_lane():
    with pytest.raises(ValueError):
        keccak_p1600_12([2 ** 64] + [0] * 24)