"""
File access for vault files.

The vault itself never opens files; it hands raw bytes to a store object
exposing ``read_bytes(path)`` and ``write_bytes(path, data)``.

- LocalFileStore: the real filesystem (atomic replace on write)
- MemoryFileStore: dict-backed store for tests and embedding

OSError from the filesystem is propagated untouched.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Protocol, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileStore(Protocol):
    def read_bytes(self, path: PathLike) -> bytes: ...

    def write_bytes(self, path: PathLike, data: bytes) -> None: ...


def _target_mode(dest: Path) -> int:
    # mkstemp always creates 0600; match what a plain open() would leave behind
    try:
        return stat.S_IMODE(dest.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class LocalFileStore:
    """Reads and writes vault files on the local filesystem."""

    def read_bytes(self, path: PathLike) -> bytes:
        src = Path(path).expanduser()
        data = src.read_bytes()
        logger.debug("read %d bytes from %s", len(data), src)
        return data

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        """
        Write ``data`` to ``path``.

        The bytes go to a temporary file next to the destination which is
        then moved over it with :func:`os.replace`, so an existing file is
        either fully replaced or left as it was. An existing file keeps its
        permission bits; a new one gets the umask default. The parent
        directory must already exist.
        """
        dest = Path(path).expanduser()
        mode = _target_mode(dest)
        fd, tmp_name = tempfile.mkstemp(dir=dest.parent, prefix=f".{dest.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, dest)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("wrote %d bytes to %s", len(data), dest)


class MemoryFileStore:
    """In-memory store keyed by path string."""

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}

    def read_bytes(self, path: PathLike) -> bytes:
        key = str(path)
        if key not in self.files:
            raise FileNotFoundError(f"No such file in memory store: {key}")
        return self.files[key]

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        self.files[str(path)] = bytes(data)
