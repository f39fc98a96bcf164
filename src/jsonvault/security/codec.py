"""
Text <-> block-aligned bytes.

Plaintext is stored as Base64 text right-padded with ``=`` up to the AES
block size, so the cipher layer never adds padding of its own:

    "{"a":1}" -> "eyJhIjoxfQ==" -> "eyJhIjoxfQ======" (16 bytes)

Decoding drops every ``=`` (the Base64 alphabet never contains one) and
restores whatever Base64 padding the decoder needs.

Text is encoded as UTF-8. Older files produced with ``btoa`` hold Latin-1
bytes instead; a payload that is not valid UTF-8 is read as Latin-1.
JSON written by :mod:`jsonvault.vault` is ASCII-escaped, so it reads the
same under either encoding.
"""
import base64
import binascii

from jsonvault.core.exceptions import DecryptionError

BLOCK_SIZE = 16
PAD_CHAR = "="


def encode_and_pad(text: str) -> bytes:
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    remainder = len(encoded) % BLOCK_SIZE
    if remainder:
        encoded += PAD_CHAR * (BLOCK_SIZE - remainder)
    return encoded.encode("ascii")


def decode_and_unpad(buffer: bytes) -> str:
    """Reverse :func:`encode_and_pad`; raises DecryptionError on garbage input."""
    try:
        encoded = bytes(buffer).decode("utf-8").replace(PAD_CHAR, "")
    except UnicodeDecodeError as exc:
        raise DecryptionError("Decrypted data is not valid text") from exc

    encoded += PAD_CHAR * (-len(encoded) % 4)
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError("Decrypted data is not valid Base64") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # btoa-era files carry Latin-1 bytes
        return raw.decode("latin-1")
