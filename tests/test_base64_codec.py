import base64

import pytest

from strawberry.base64_codec import decode, encode
from strawberry.buffers import DynamicByteBuffer


def test_empty():
    assert encode(b"") == ""
    assert decode("") == b""


def test_three_bytes_pads_to_multiple_of_three():
    assert encode(b"Man") == "TWFu=="


def test_one_byte():
    assert encode(b"M") == "TQ="


@pytest.mark.parametrize("length", range(0, 12))
def test_round_trip(length):
    data = bytes(range(200, 200 + length))
    assert decode(encode(data)) == data


@pytest.mark.parametrize("length", range(0, 12))
def test_length_is_multiple_of_three(length):
    assert len(encode(bytes(length))) % 3 == 0


@pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"any carnal pleas", bytes(range(256))])
def test_characters_match_standard_alphabet(data):
    expected = base64.b64encode(data).decode("ascii").rstrip("=")
    assert encode(data).rstrip("=") == expected


@pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"hello world", bytes(range(64))])
def test_decodes_standard_base64(data):
    assert decode(base64.b64encode(data).decode("ascii")) == data


def test_encode_accepts_buffer():
    data = b"\x00\xff\x10"
    assert encode(DynamicByteBuffer(data)) == encode(data)


def test_decode_ignores_extra_padding():
    assert decode(encode(b"Man") + "==") == b"Man"


def test_invalid_character_rejected():
    with pytest.raises(ValueError):
        decode("ab*d")


def test_padding_in_middle_rejected():
    with pytest.raises(ValueError):
        decode("ab=cd")