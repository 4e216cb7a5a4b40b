import pytest

from pgarray.array import Array, Dimension
from pgarray.binary import (
    ArrayFormatError,
    array_from_sql,
    array_to_sql,
    codec_for_oid,
)

CASES = [
    (16, False, True, True),
    (17, bytes([0, 1]), bytes([254, 255]), bytes([10, 11])),
    (18, ord("a"), ord("z"), ord("0")),
    (19, "hello", "world", "!"),
    (21, 0, 1, 2),
    (23, 0, 1, 2),
    (25, "hello", "world", "!"),
    (1042, "hello", "world", "!    "),
    (1043, "hello", "world", "!"),
    (20, 0, 1, 2),
    (701, 0.0, 1.5, 0.009),
]


@pytest.mark.parametrize("oid, v1, v2, v3", CASES)
def test_one_dimensional_round_trip(oid, v1, v2, v3):
    codec = codec_for_oid(oid)
    original = Array.from_vec([v1, v2, None], 1)
    decoded = array_from_sql(array_to_sql(original, codec), codec)
    assert decoded == original


@pytest.mark.parametrize("oid, v1, v2, v3", CASES)
def test_two_dimensional_round_trip(oid, v1, v2, v3):
    codec = codec_for_oid(oid)
    original = Array.from_vec([v1, v2], 0)
    original.wrap(-1)
    original.push(Array.from_vec([None, v3], 0))
    decoded = array_from_sql(array_to_sql(original, codec), codec)
    assert decoded == original
    assert decoded.dimensions() == (Dimension(2, -1), Dimension(2, 0))


def test_float4_round_trip():
    codec = codec_for_oid(700)
    original = Array.from_vec([0.0, 1.5, 0.009], 1)
    decoded = array_from_sql(array_to_sql(original, codec), codec)
    assert decoded.to_list() == pytest.approx([0.0, 1.5, 0.009])


def test_int4_encoding_is_pinned():
    raw = array_to_sql(Array.from_vec([1, 2], 1), codec_for_oid(23))
    assert raw == bytes.fromhex(
        "00000001" "00000000" "00000017"
        "00000002" "00000001"
        "00000004" "00000001"
        "00000004" "00000002"
    )


def test_null_sets_flag():
    raw = array_to_sql(Array.from_vec([None], 1), codec_for_oid(23))
    assert raw == bytes.fromhex(
        "00000001" "00000001" "00000017" "00000001" "00000001" "ffffffff"
    )


def test_empty_array():
    raw = bytes.fromhex("00000000" "00000000" "00000017")
    decoded = array_from_sql(raw, codec_for_oid(23))
    assert decoded == Array([], [])
    assert str(decoded) == "{}"
    assert array_to_sql(decoded, codec_for_oid(23)) == raw


def test_truncated_data():
    raw = array_to_sql(Array.from_vec([1, 2], 1), codec_for_oid(23))
    with pytest.raises(ArrayFormatError):
        array_from_sql(raw[:-1], codec_for_oid(23))


def test_trailing_data():
    raw = array_to_sql(Array.from_vec([1, 2], 1), codec_for_oid(23))
    with pytest.raises(ArrayFormatError, match="not drained"):
        array_from_sql(raw + b"\x00", codec_for_oid(23))


def test_negative_dimension_count():
    raw = bytes.fromhex("ffffffff" "00000000" "00000017")
    with pytest.raises(ArrayFormatError, match="dimension count"):
        array_from_sql(raw, codec_for_oid(23))


def test_negative_dimension_size():
    raw = bytes.fromhex("00000001" "00000000" "00000017" "ffffffff" "00000001")
    with pytest.raises(ArrayFormatError, match="dimension size"):
        array_from_sql(raw, codec_for_oid(23))


def test_bad_element_width():
    raw = bytes.fromhex("00000001" "00000000" "00000017" "00000001" "00000001" "00000002" "0001")
    with pytest.raises(ArrayFormatError):
        array_from_sql(raw, codec_for_oid(23))


def test_unknown_oid():
    with pytest.raises(ValueError):
        codec_for_oid(999999)


def test_encode_out_of_range():
    with pytest.raises(ArrayFormatError):
        codec_for_oid(21).encode(70000)


def test_codec_null_handling():
    codec = codec_for_oid(25)
    assert codec.encode(None) is None
    assert codec.decode(None) is None
    assert codec.decode(codec.encode("hello")) == "hello"