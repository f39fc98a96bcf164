"""Unit tests for the <ivHex>:<cipherHex> at-rest format."""

import pytest

from jsonvault.core.exceptions import DecryptionError, MalformedCipherTextError
from jsonvault.security.ciphertext import deserialize, serialize

IV = bytes(range(16))
IV_HEX = "000102030405060708090a0b0c0d0e0f"


def test_serialize():
    assert serialize(IV, b"\xde\xad\xbe\xef") == IV_HEX + ":deadbeef"


def test_deserialize():
    iv, ct = deserialize(IV_HEX + ":deadbeef")
    assert iv == IV
    assert ct == b"\xde\xad\xbe\xef"


def test_deserialize_uppercase_hex():
    iv, ct = deserialize(IV_HEX.upper() + ":DEADBEEF")
    assert iv == IV
    assert ct == b"\xde\xad\xbe\xef"


def test_deserialize_bytes_input():
    iv, ct = deserialize((IV_HEX + ":00ff").encode("ascii"))
    assert iv == IV
    assert ct == b"\x00\xff"


@pytest.mark.parametrize("ending", ["\n", "\r\n"])
def test_deserialize_tolerates_one_trailing_newline(ending):
    iv, ct = deserialize(IV_HEX + ":00ff" + ending)
    assert ct == b"\x00\xff"


def test_deserialize_empty_cipher_half():
    iv, ct = deserialize(IV_HEX + ":")
    assert iv == IV
    assert ct == b""


@pytest.mark.parametrize(
    "text, message",
    [
        (IV_HEX + "deadbeef", "exactly one"),
        ("", "exactly one"),
        (IV_HEX + ":dead:beef", "exactly one"),
        (IV_HEX + ":xyz0", "Ciphertext is not valid"),
        (IV_HEX + ":abc", "Ciphertext is not valid"),
        (IV_HEX + ":de ad", "Ciphertext is not valid"),
        ("0g" + IV_HEX[2:] + ":00", "IV is not valid"),
        ("0001020304:00", "IV must be 16 bytes"),
        (IV_HEX + "00:00", "IV must be 16 bytes"),
        (":00", "IV must be 16 bytes"),
        (IV_HEX + ":00\n\n", "Ciphertext is not valid"),
    ],
)
def test_deserialize_malformed(text, message):
    with pytest.raises(MalformedCipherTextError, match=message):
        deserialize(text)


def test_deserialize_non_ascii_bytes():
    with pytest.raises(MalformedCipherTextError, match="ASCII"):
        deserialize(IV_HEX.encode() + b":\xff\xfe")


def test_malformed_is_a_decryption_error():
    with pytest.raises(DecryptionError):
        deserialize("no separator here")
