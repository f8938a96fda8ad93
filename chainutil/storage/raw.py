"""
Storage
File: raw.py

Purpose: Whole-file load/save of opaque bytes.

Files are created with FILE_MODE (subject to the process umask) and
existing content is always replaced in full. There is no atomic rename,
so a failed save can leave the target empty, truncated or unchanged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from chainutil.schemas.errors import PersistenceIOException

logger = logging.getLogger(__name__)

# owner read/write, group/other read
FILE_MODE: int = 0o644

_WRITE_FLAGS: int = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)

PathLike = Union[str, os.PathLike]


def open_for_write(path: PathLike):
    """
    Open path for binary writing, creating it with FILE_MODE or truncating it.

    Returns a file object to be used as a context manager. OSError
    propagates to the caller, who decides how to wrap it.
    """
    fd = os.open(path, _WRITE_FLAGS, FILE_MODE)
    try:
        return os.fdopen(fd, "wb")
    except BaseException:
        os.close(fd)
        raise


def load_from_disk(path: PathLike) -> bytes:
    """
    Load the full contents of a file.

    Raises:
        PersistenceIOException: If the file cannot be opened or fully read
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("Unable to load file %s: %s", os.fspath(path), e)
        raise PersistenceIOException(path, e, message=f"Unable to load file {os.fspath(path)}: {e}") from e
    logger.debug("Loaded %d bytes from %s", len(data), os.fspath(path))
    return data


def save_to_disk(path: PathLike, data: bytes) -> None:
    """
    Write bytes to a file, replacing any existing content.

    Raises:
        PersistenceIOException: If the file cannot be created/truncated or fully written
    """
    try:
        with open_for_write(path) as f:
            f.write(data)
    except OSError as e:
        logger.error("Unable to write to file %s: %s", os.fspath(path), e)
        raise PersistenceIOException(path, e, message=f"Unable to write to file {os.fspath(path)}: {e}") from e
    logger.debug("Saved %d bytes to %s", len(data), os.fspath(path))


__all__ = [
    "FILE_MODE",
    "open_for_write",
    "load_from_disk",
    "save_to_disk",
]
