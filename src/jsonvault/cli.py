"""
Command line interface for jsonvault.

    jsonvault encrypt notes.json notes.vault
    jsonvault decrypt notes.vault --indent 2
    jsonvault info

The password is taken from ``JSONVAULT_PASSWORD`` when set, otherwise it is
prompted for with :func:`getpass.getpass`.
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from jsonvault import __version__
from jsonvault.core.exceptions import VaultError
from jsonvault.logging_config import configure_logging
from jsonvault.security import cipher
from jsonvault.security.kdf import kdf_params_to_dict
from jsonvault.vault import decrypt_from_file, encrypt_to_file

logger = logging.getLogger(__name__)

PASSWORD_ENV = "JSONVAULT_PASSWORD"


class CLIError(Exception):
    # raised for user-facing problems that are not vault or I/O errors
    pass


def _get_password(confirm: bool = False) -> str:
    """Return the password from the environment or an interactive prompt."""
    password = os.getenv(PASSWORD_ENV)
    if password is None:
        password = getpass.getpass("Password: ")
        if confirm and getpass.getpass("Confirm password: ") != password:
            raise CLIError("Passwords do not match")
    if not password:
        raise CLIError("Password must not be empty")
    return password


def _read_json_source(source: str):
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).expanduser().read_text(encoding="utf-8")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CLIError(f"{source} is not valid JSON: {exc}") from exc


def cmd_encrypt(args: argparse.Namespace) -> int:
    obj = _read_json_source(args.source)
    password = _get_password(confirm=True)
    encrypt_to_file(args.dest, password, obj)
    logger.info("Encrypted %s -> %s", args.source, args.dest)
    return 0


def cmd_decrypt(args: argparse.Namespace) -> int:
    password = _get_password()
    obj = decrypt_from_file(args.source, password)
    text = json.dumps(obj, indent=args.indent, ensure_ascii=False)
    if args.output:
        Path(args.output).expanduser().write_text(text + "\n", encoding="utf-8")
        logger.info("Decrypted %s -> %s", args.source, args.output)
    else:
        print(text)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    info = {
        "kdf": kdf_params_to_dict(),
        "cipher": {
            "algo": "aes-256-cbc",
            "key_size": cipher.KEY_SIZE,
            "iv_size": cipher.IV_SIZE,
            "padding": "base64 '=' to 16 bytes",
        },
        "format": "<ivHex>:<cipherHex>",
    }
    print(json.dumps(info, indent=2))
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonvault",
        description="Encrypt and decrypt JSON documents with a password.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt a JSON file into a vault file")
    enc.add_argument("source", help="JSON file to encrypt ('-' for stdin)")
    enc.add_argument("dest", help="Vault file to write")
    enc.set_defaults(func=cmd_encrypt)

    dec = sub.add_parser("decrypt", help="Decrypt a vault file to JSON")
    dec.add_argument("source", help="Vault file to decrypt")
    dec.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write JSON here instead of stdout",
    )
    dec.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output (default: compact)",
    )
    dec.set_defaults(func=cmd_decrypt)

    info = sub.add_parser("info", help="Show the fixed KDF and cipher parameters")
    info.set_defaults(func=cmd_info)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        return args.func(args)
    except (VaultError, CLIError, OSError) as exc:
        print(f"jsonvault: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
