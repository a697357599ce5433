import pytest

from placewords.codec import (
    LFSR_MASK,
    PREFIX,
    Placewords,
    PlacewordsError,
    lfsr_forward,
    lfsr_reverse,
)
from placewords.s2 import ll_to_s2
from placewords.words import ORDINAL_COUNT, WordList

POINTS = [
    (33533333, -7583333),
    (28613895, 77209006),
    (55755833, 37617222),
    (-27467778, 153028056),
    (37749000, -122419400),
    (-77846323, 166668235),
]


@pytest.fixture(scope="module")
def codec():
    return Placewords(WordList((i, f"w{i}") for i in range(ORDINAL_COUNT)))


@pytest.mark.parametrize("n", [0, 1, 2, 12345, LFSR_MASK, 0x155555555555 & LFSR_MASK])
def test_lfsr_reverse_undoes_forward(n):
    assert lfsr_reverse(lfsr_forward(n)) == n
    assert lfsr_forward(lfsr_reverse(n)) == n


def test_lfsr_stays_within_mask():
    for n in (1, 7, LFSR_MASK, 1 << 41):
        assert 0 <= lfsr_forward(n) <= LFSR_MASK
        assert 0 <= lfsr_reverse(n) <= LFSR_MASK


def test_lfsr_zero_is_fixed():
    assert lfsr_forward(0) == 0
    assert lfsr_reverse(0) == 0


def test_lfsr_is_injective_on_sample():
    outputs = {lfsr_forward(n) for n in range(2000)}
    assert len(outputs) == 2000


def test_encode_zero_cell(codec):
    assert codec.encode(1) == "s2pw://w0.w0.w0.w0"


def test_encode_face_bit_goes_to_third_word(codec):
    assert codec.encode((1 << 61) | 1) == "s2pw://w0.w0.w1.w0"


def test_decode_three_zero_words(codec):
    assert codec.decode("s2pw://w0.w0.w0") == 1


@pytest.mark.parametrize("lat_e6, lon_e6", POINTS)
def test_encode_shape(codec, lat_e6, lon_e6):
    text = codec.encode(ll_to_s2(lat_e6, lon_e6))
    assert text.startswith(PREFIX)
    assert len(text[len(PREFIX):].split(".")) == 4


@pytest.mark.parametrize("lat_e6, lon_e6", POINTS)
def test_decode_encode_round_trip(codec, lat_e6, lon_e6):
    s2 = ll_to_s2(lat_e6, lon_e6)
    assert codec.decode(codec.encode(s2)) == (s2 & ~0x1F) | 1


@pytest.mark.parametrize("lat_e6, lon_e6", POINTS)
def test_encode_decode_round_trip(codec, lat_e6, lon_e6):
    text = codec.encode(ll_to_s2(lat_e6, lon_e6))
    assert codec.encode(codec.decode(text)) == text


def test_three_words_equal_zero_excess(codec):
    text = codec.encode(ll_to_s2(*POINTS[2]))
    three = text.rsplit(".", 1)[0]
    assert codec.decode(three) == codec.decode(three + ".w0")


def test_unknown_fourth_word_is_ignored(codec):
    text = codec.encode(ll_to_s2(*POINTS[3]))
    three = text.rsplit(".", 1)[0]
    assert codec.decode(three + ".nonsense") == codec.decode(three)


def test_empty_segments_are_skipped(codec):
    assert codec.decode("s2pw://w5..w9.w12") == codec.decode("s2pw://w5.w9.w12")


def test_negative_id_is_unsigned(codec):
    assert codec.encode(-1) == codec.encode((1 << 64) - 1)


def test_decode_requires_prefix(codec):
    with pytest.raises(PlacewordsError):
        codec.decode("http://w0.w0.w0")


def test_decode_requires_three_words(codec):
    with pytest.raises(PlacewordsError):
        codec.decode("s2pw://w0.w0")


def test_decode_rejects_unknown_word(codec):
    with pytest.raises(PlacewordsError, match="bogus"):
        codec.decode("s2pw://w0.bogus.w0")


def test_decode_rejects_long_text(codec):
    with pytest.raises(PlacewordsError):
        codec.decode(PREFIX + "w0." * 100)


def test_for_language_loads_file(tmp_path):
    (tmp_path / "xx.txt").write_text(
        "".join(f"{i} x{i}\n" for i in range(ORDINAL_COUNT)), encoding="utf-8"
    )
    codec = Placewords.for_language("xx", tmp_path)
    assert codec.encode(1) == "s2pw://x0.x0.x0.x0"