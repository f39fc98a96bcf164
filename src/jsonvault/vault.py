"""
Password-protected JSON documents.

Every call is a one-shot pipeline with no cached state:

    encrypt: object -> JSON -> encode_and_pad -> AES-256-CBC (fresh IV) -> "<iv>:<ct>"
    decrypt: "<iv>:<ct>" -> AES-256-CBC -> decode_and_unpad -> JSON -> object

There is no integrity check. A wrong password is only noticed when the
decrypted bytes fail to decode or parse, which surfaces as
:class:`DecryptionError`; in rare cases garbage may still parse.

Never log passwords, keys, plaintext or ciphertext values.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from jsonvault.core.exceptions import DecryptionError, InvalidInputLengthError
from jsonvault.core.fileio import FileStore, LocalFileStore, PathLike
from jsonvault.security import cipher
from jsonvault.security.ciphertext import deserialize, serialize
from jsonvault.security.codec import decode_and_unpad, encode_and_pad
from jsonvault.security.kdf import derive_key

logger = logging.getLogger(__name__)

Password = Union[str, bytes]


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def encrypt_text(password: Password, text: str) -> str:
    """Encrypt ``text`` and return it in ``<ivHex>:<cipherHex>`` form."""
    padded = encode_and_pad(text)
    iv = cipher.generate_iv()
    key = derive_key(password)
    return serialize(iv, cipher.encrypt(key, iv, padded))


def decrypt_text(password: Password, cipher_text: Union[str, bytes]) -> str:
    """
    Decrypt a string produced by :func:`encrypt_text`.

    Raises:
        MalformedCipherTextError: ``cipher_text`` is not ``<hex>:<hex>``.
        DecryptionError: the decrypted bytes are not valid padded text.
    """
    iv, encrypted = deserialize(cipher_text)
    key = derive_key(password)
    try:
        padded = cipher.decrypt(key, iv, encrypted)
    except InvalidInputLengthError as exc:
        raise DecryptionError("Stored ciphertext is not block aligned") from exc
    return decode_and_unpad(padded)


# ---------------------------------------------------------------------------
# JSON objects
# ---------------------------------------------------------------------------

def encrypt_to_text(password: Password, obj: Any) -> str:
    # compact, ASCII-escaped JSON keeps output identical to older vault files
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=True)
    return encrypt_text(password, text)


def decrypt_from_text(password: Password, cipher_text: Union[str, bytes]) -> Any:
    text = decrypt_text(password, cipher_text)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecryptionError("Decrypted data is not valid JSON (wrong password?)") from exc


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def encrypt_to_file(
    path: PathLike,
    password: Password,
    obj: Any,
    store: Optional[FileStore] = None,
) -> None:
    """Encrypt ``obj`` and write the ciphertext to ``path`` through ``store``."""
    if store is None:
        store = LocalFileStore()
    data = encrypt_to_text(password, obj).encode("ascii")
    store.write_bytes(path, data)
    logger.debug("encrypted object written to %s (%d bytes)", path, len(data))


def decrypt_from_file(
    path: PathLike,
    password: Password,
    store: Optional[FileStore] = None,
) -> Any:
    """Read the ciphertext at ``path`` through ``store`` and decrypt it."""
    if store is None:
        store = LocalFileStore()
    data = store.read_bytes(path)
    logger.debug("decrypting %s (%d bytes)", path, len(data))
    return decrypt_from_text(password, data)
