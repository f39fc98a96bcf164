"""AES-256-CBC over block-aligned buffers.

No padding is applied here; callers hand in data already padded by
:mod:`jsonvault.security.codec`. There is no authentication tag, so a
tampered ciphertext decrypts to garbage instead of failing.
"""
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from jsonvault.core.exceptions import InvalidInputLengthError

BLOCK_SIZE = 16
IV_SIZE = 16
KEY_SIZE = 32


def generate_iv() -> bytes:
    return os.urandom(IV_SIZE)


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-256 key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(iv) != IV_SIZE:
        raise ValueError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def _check_aligned(data: bytes) -> None:
    if len(data) % BLOCK_SIZE:
        raise InvalidInputLengthError(
            f"Cipher input must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}"
        )


def encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    _check_aligned(data)
    encryptor = _cipher(key, iv).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def decrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    _check_aligned(data)
    decryptor = _cipher(key, iv).decryptor()
    return decryptor.update(data) + decryptor.finalize()
