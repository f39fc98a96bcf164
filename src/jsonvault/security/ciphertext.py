"""
At-rest text format for encrypted vault data.

    <ivHex>:<cipherHex>

Both halves are lowercase hex on write; ``:`` is never a hex digit so it
separates them unambiguously.
"""
import re
from typing import Tuple, Union

from jsonvault.core.exceptions import MalformedCipherTextError

SEPARATOR = ":"
IV_SIZE = 16

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def serialize(iv: bytes, cipher_bytes: bytes) -> str:
    return iv.hex() + SEPARATOR + cipher_bytes.hex()


def _unhex(part: str, label: str) -> bytes:
    if len(part) % 2 or not _HEX_RE.fullmatch(part):
        raise MalformedCipherTextError(f"{label} is not valid even-length hex")
    return bytes.fromhex(part)


def deserialize(text: Union[str, bytes]) -> Tuple[bytes, bytes]:
    """
    Split a ciphertext string into ``(iv, cipher_bytes)``.

    ``bytes`` input must be ASCII. One trailing line ending is tolerated;
    anything else that does not match the format raises
    :class:`MalformedCipherTextError`.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise MalformedCipherTextError("Ciphertext is not ASCII") from exc

    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]

    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        raise MalformedCipherTextError(
            f"Ciphertext must contain exactly one '{SEPARATOR}', found {len(parts) - 1}"
        )

    iv = _unhex(parts[0], "IV")
    if len(iv) != IV_SIZE:
        raise MalformedCipherTextError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")
    return iv, _unhex(parts[1], "Ciphertext")
