"""Cryptographic building blocks for jsonvault.

- PBKDF2-HMAC-SHA512 key derivation (fixed parameters)
- Base64 text padding to the AES block size
- AES-256-CBC over block-aligned buffers
- ``<ivHex>:<cipherHex>`` at-rest format
"""

from .kdf import derive_key, kdf_params_to_dict
from .codec import encode_and_pad, decode_and_unpad
from .cipher import generate_iv, encrypt, decrypt
from .ciphertext import serialize, deserialize

__all__ = [
    "derive_key",
    "kdf_params_to_dict",
    "encode_and_pad",
    "decode_and_unpad",
    "generate_iv",
    "encrypt",
    "decrypt",
    "serialize",
    "deserialize",
]
