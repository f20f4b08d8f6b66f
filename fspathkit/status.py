"""File status queries and the error raised by filesystem operations."""

from __future__ import annotations

import errno as _errno
import os
import stat as _stat
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

PERMS_MASK = 0o7777
PERMS_NOT_KNOWN = 0xFFFF

_NOT_FOUND_ERRNOS = {_errno.ENOENT, _errno.ENOTDIR}


class FileType(IntEnum):
    """Kind of filesystem object."""

    STATUS_ERROR = 0
    FILE_NOT_FOUND = 1
    REGULAR_FILE = 2
    DIRECTORY_FILE = 3
    SYMLINK_FILE = 4
    BLOCK_FILE = 5
    CHARACTER_FILE = 6
    FIFO_FILE = 7
    SOCKET_FILE = 8
    TYPE_UNKNOWN = 9

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class FileStatus:
    """Type and permission bits of a filesystem object."""

    type: FileType = FileType.STATUS_ERROR
    permissions: int = PERMS_NOT_KNOWN


class FilesystemError(OSError):
    """Error reported by a filesystem operation, carrying the paths involved."""

    def __init__(
        self,
        what: str,
        path1: Optional[str] = None,
        path2: Optional[str] = None,
        errno: int = 0,
    ) -> None:
        message = os.strerror(errno) if errno else ""
        super().__init__(errno, message)
        self.what = what
        self.path1 = "" if path1 is None else path1
        self.path2 = "" if path2 is None else path2
        self._has_path1 = path1 is not None
        self._has_path2 = path2 is not None

    def __str__(self) -> str:
        text = self.what
        if self.strerror:
            text = f"{text}: {self.strerror}"
        if self._has_path1:
            text = f'{text}: "{self.path1}"'
        if self._has_path2:
            text = f'{text}, "{self.path2}"'
        return text


PathArg = Union[str, bytes, "os.PathLike[str]"]


def _as_path(path: object) -> str:
    try:
        result = os.fspath(path)  # type: ignore[arg-type]
    except TypeError:
        return str(path)
    return os.fsdecode(result)


def _type_from_mode(mode: int) -> FileType:
    if _stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    if _stat.S_ISDIR(mode):
        return FileType.DIRECTORY_FILE
    if _stat.S_ISLNK(mode):
        return FileType.SYMLINK_FILE
    if _stat.S_ISBLK(mode):
        return FileType.BLOCK_FILE
    if _stat.S_ISCHR(mode):
        return FileType.CHARACTER_FILE
    if _stat.S_ISFIFO(mode):
        return FileType.FIFO_FILE
    if _stat.S_ISSOCK(mode):
        return FileType.SOCKET_FILE
    return FileType.TYPE_UNKNOWN


def _query(path: object, operation: str, follow: bool) -> FileStatus:
    text = _as_path(path)
    try:
        st = os.stat(text) if follow else os.lstat(text)
    except OSError as exc:
        if exc.errno in _NOT_FOUND_ERRNOS:
            return FileStatus(FileType.FILE_NOT_FOUND, 0)
        raise FilesystemError(operation, text, errno=exc.errno or 0) from exc
    except ValueError as exc:
        raise FilesystemError(operation, text, errno=_errno.EINVAL) from exc
    return FileStatus(_type_from_mode(st.st_mode), st.st_mode & PERMS_MASK)


def status(path: PathArg) -> FileStatus:
    """Status of ``path``, following symbolic links.

    A missing object yields ``FILE_NOT_FOUND``; other failures raise.
    """
    return _query(path, "status", follow=True)


def symlink_status(path: PathArg) -> FileStatus:
    """Status of ``path`` itself, not following a final symbolic link."""
    return _query(path, "symlink_status", follow=False)


def _resolve(target: object, follow: bool = True) -> FileStatus:
    if isinstance(target, FileStatus):
        return target
    return status(target) if follow else symlink_status(target)  # type: ignore[arg-type]


def status_known(st: FileStatus) -> bool:
    """True if the status holds a determined type."""
    return st.type != FileType.STATUS_ERROR


def type_present(st: FileStatus) -> bool:
    """True if the status carries a type."""
    return st.type != FileType.STATUS_ERROR


def permissions_present(st: FileStatus) -> bool:
    """True if the status carries permission bits."""
    return st.permissions != PERMS_NOT_KNOWN


def exists(target: object) -> bool:
    """True if the status (or the object at the path) exists."""
    st = _resolve(target)
    return status_known(st) and st.type != FileType.FILE_NOT_FOUND


def is_regular_file(target: object) -> bool:
    """True if the status (or the object at the path) is a regular file."""
    return _resolve(target).type == FileType.REGULAR_FILE


def is_directory(target: object) -> bool:
    """True if the status (or the object at the path) is a directory."""
    return _resolve(target).type == FileType.DIRECTORY_FILE


def is_symlink(target: object) -> bool:
    """True if the status (or the object at the path, unfollowed) is a symlink."""
    return _resolve(target, follow=False).type == FileType.SYMLINK_FILE


def is_other(target: object) -> bool:
    """True if the object exists but is no file, directory or symlink."""
    st = _resolve(target)
    return exists(st) and st.type not in (
        FileType.REGULAR_FILE,
        FileType.DIRECTORY_FILE,
        FileType.SYMLINK_FILE,
    )


def file_size(path: PathArg) -> int:
    """Size in bytes of the regular file at ``path``."""
    text = _as_path(path)
    try:
        st = os.stat(text)
    except OSError as exc:
        raise FilesystemError("file_size", text, errno=exc.errno or 0) from exc
    except ValueError as exc:
        raise FilesystemError("file_size", text, errno=_errno.EINVAL) from exc
    if not _stat.S_ISREG(st.st_mode):
        raise FilesystemError("file_size", text, errno=_errno.EPERM)
    return st.st_size