"""
Exceptions for jsonvault
Everything raised by the library derives from VaultError so callers
have a single error catcher. OSError from file access is never wrapped.
"""


class VaultError(Exception):
    # general container for errors
    pass


class DecryptionError(VaultError):
    # raised when decrypted data is not valid text/JSON (wrong password or corrupt data)
    pass


class MalformedCipherTextError(DecryptionError):
    # raised when a ciphertext string is not "<ivHex>:<cipherHex>"
    pass


class InvalidInputLengthError(VaultError):
    # raised when cipher input is not a multiple of the AES block size
    pass
