"""jsonvault: password-encrypted JSON documents on disk."""

from jsonvault.core.exceptions import (
    DecryptionError,
    InvalidInputLengthError,
    MalformedCipherTextError,
    VaultError,
)
from jsonvault.core.fileio import LocalFileStore, MemoryFileStore
from jsonvault.vault import (
    decrypt_from_file,
    decrypt_from_text,
    decrypt_text,
    encrypt_to_file,
    encrypt_to_text,
    encrypt_text,
)

__version__ = "0.1.0"

__all__ = [
    "VaultError",
    "DecryptionError",
    "MalformedCipherTextError",
    "InvalidInputLengthError",
    "LocalFileStore",
    "MemoryFileStore",
    "encrypt_text",
    "decrypt_text",
    "encrypt_to_text",
    "decrypt_from_text",
    "encrypt_to_file",
    "decrypt_from_file",
]
