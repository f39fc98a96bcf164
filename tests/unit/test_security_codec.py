"""Unit tests for the Base64 block padding codec."""

import base64

import pytest

from jsonvault.core.exceptions import DecryptionError
from jsonvault.security.codec import BLOCK_SIZE, decode_and_unpad, encode_and_pad


@pytest.mark.parametrize(
    "text",
    [
        "",
        "a",
        '{"a":1}',
        "abcdefghijkl",  # Base64 is exactly 16 chars, no padding needed
        "abcdefghijk",  # Base64 ends with its own '=' before block padding
        "x" * 100,
        "unicode 🔒 ünïcödé",
        "line\nbreaks\tand\x00nul",
    ],
)
def test_roundtrip(text):
    assert decode_and_unpad(encode_and_pad(text)) == text


@pytest.mark.parametrize("length", range(0, 40))
def test_output_is_block_aligned(length):
    padded = encode_and_pad("z" * length)
    assert len(padded) % BLOCK_SIZE == 0


def test_known_encoding():
    """'{"a":1}' -> 'eyJhIjoxfQ==' padded with '=' to 16 bytes."""
    assert encode_and_pad('{"a":1}') == b"eyJhIjoxfQ======"


def test_aligned_base64_gets_no_extra_block():
    text = "abcdefghijkl"
    assert base64.b64encode(text.encode()) == b"YWJjZGVmZ2hpamts"
    assert encode_and_pad(text) == b"YWJjZGVmZ2hpamts"


def test_empty_string_encodes_to_empty_buffer():
    assert encode_and_pad("") == b""
    assert decode_and_unpad(b"") == ""


def test_decode_strips_all_padding_runs():
    """A full block of '=' after the data is dropped together with Base64 padding."""
    assert decode_and_unpad(b"eyJhIjoxfQ==" + b"=" * 20) == '{"a":1}'


def test_decode_rejects_non_utf8():
    with pytest.raises(DecryptionError, match="not valid text"):
        decode_and_unpad(b"\xff\xfe\x00garbage\x80\x81\x82\x83\x84\x85")


def test_decode_rejects_invalid_base64():
    with pytest.raises(DecryptionError, match="Base64"):
        decode_and_unpad(b"!!!!not*base64??")


def test_decode_rejects_bad_length_base64():
    # five Base64 characters can never be decoded
    with pytest.raises(DecryptionError):
        decode_and_unpad(b"abcde===========")


def test_decode_falls_back_to_latin1_payload():
    """Payloads written with btoa are Latin-1 bytes, not UTF-8."""
    payload = base64.b64encode(b"\xff\xfe\xfd").ljust(16, b"=")
    assert decode_and_unpad(payload) == "\u00ff\u00fe\u00fd"


def test_decode_prefers_utf8_when_valid():
    payload = base64.b64encode("José".encode("utf-8")).ljust(16, b"=")
    assert decode_and_unpad(payload) == "José"
