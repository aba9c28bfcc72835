"""File-system helpers for the install and download code."""

from __future__ import annotations

import enum
import logging
import os
import stat

log = logging.getLogger(__name__)


class InodeType(enum.Enum):
    """What a path refers to."""

    NOT_EXIST = "not_exist"
    DIRECTORY = "directory"
    FILE = "file"


def mkdirs(path) -> None:
    """Create a directory and all its parents; existing ones are fine."""
    os.makedirs(path, exist_ok=True)


def remove(path) -> None:
    """Delete a file, logging rather than raising on failure."""
    try:
        os.remove(path)
    except OSError as exc:
        log.warning("error removing %s file: %s", path, exc)


def load(path) -> bytes:
    """Read a whole file."""
    with open(path, "rb") as f:
        return f.read()


def save(path, data) -> None:
    """Write ``data`` to ``path``, replacing any existing contents."""
    with open(path, "wb") as f:
        f.write(bytes(data))


def file_exists(path) -> bool:
    """Return whether anything exists at ``path``."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def rename(source, target) -> None:
    """Move ``source`` to ``target``, overwriting the target."""
    try:
        os.remove(target)
    except OSError:
        pass
    try:
        os.rename(source, target)
    except OSError as exc:
        raise OSError(exc.errno, f"failed to rename from {source} to {target}: {exc.strerror}") from exc


def get_size(path) -> int:
    """Return the size of ``path`` in bytes, or -1 if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        log.warning("cannot get size of %s: %s", path, exc)
        return -1


def inode_type(path) -> InodeType:
    """Classify ``path`` as missing, a directory or a regular file."""
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return InodeType.NOT_EXIST
    if stat.S_ISDIR(mode):
        return InodeType.DIRECTORY
    if stat.S_ISREG(mode):
        return InodeType.FILE
    raise OSError(f"unknown inode type {path}")


def list_dir(path) -> list[str]:
    """Return the entry names in a directory, or an empty list if it is missing."""
    try:
        return os.listdir(path)
    except FileNotFoundError:
        return []