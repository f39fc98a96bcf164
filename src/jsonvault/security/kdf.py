"""Password key derivation for jsonvault."""
from typing import Any, Dict, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

# Fixed parameters; existing vault files can only be opened if these never change.
SALT = b"salt"
ITERATIONS = 1
KEY_LENGTH = 32


def derive_key(password: Union[str, bytes]) -> bytes:
    """
    Derive the 32-byte AES-256 key for ``password`` using PBKDF2-HMAC-SHA512.
    Returns raw derived key bytes.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=KEY_LENGTH,
        salt=SALT,
        iterations=ITERATIONS,
    )
    return kdf.derive(password)


def kdf_params_to_dict() -> Dict[str, Any]:
    """Describe the fixed derivation parameters (salt as hex) for diagnostics."""
    return {
        "algo": "pbkdf2",
        "hash": "sha512",
        "salt": SALT.hex(),
        "iterations": ITERATIONS,
        "length": KEY_LENGTH,
    }
