"""Small filesystem programs: sizes, status reports, listings and tree walks."""

from __future__ import annotations

import errno as _errno
import os
import shutil
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from .fspath import FsPath, PathSource
from .status import (
    FileStatus,
    FileType,
    FilesystemError,
    exists,
    file_size,
    is_directory,
    is_other,
    is_regular_file,
    is_symlink,
    status,
    status_known,
    symlink_status,
)

_CATEGORY = "system"

ErrorHandler = Callable[[FilesystemError], None]


@dataclass
class LsSummary:
    """Result of listing one path: per-entry lines and counts by kind."""

    path: FsPath
    is_directory: bool
    lines: List[str] = field(default_factory=list)
    file_count: int = 0
    dir_count: int = 0
    other_count: int = 0
    err_count: int = 0

    def render(self) -> str:
        """The listing as printed by the ``ls`` command."""
        if not self.is_directory:
            return f"\nFound: {self.path.quoted()}\n"
        body = "".join(f"{line}\n" for line in self.lines)
        return (
            f"\nIn directory: {self.path.quoted()}\n\n"
            f"{body}"
            f"\n{self.file_count} files\n"
            f"{self.dir_count} directories\n"
            f"{self.other_count} others\n"
            f"{self.err_count} errors\n"
        )


def _list_dir(path: PathSource) -> List[FsPath]:
    """Entries of a directory, as full paths, in the order the system gives them."""
    directory = FsPath(path)
    text = str(directory)
    try:
        with os.scandir(text) as it:
            names = [entry.name for entry in it]
    except OSError as exc:
        raise FilesystemError("directory_iterator", text, errno=exc.errno or 0) from exc
    except ValueError as exc:
        raise FilesystemError("directory_iterator", text, errno=_errno.EINVAL) from exc
    return [directory / name for name in names]


def describe(path: PathSource) -> str:
    """One line telling whether ``path`` exists and what kind of object it is."""
    p = FsPath(path)
    q = p.quoted()
    if not exists(p):
        return f"{q} does not exist"
    if is_regular_file(p):
        return f"{q} size is {file_size(p)}"
    if is_directory(p):
        return f"{q} is a directory"
    return f"{q} exists, but is not a regular file or directory"


def list_directory(path: PathSource, sort: bool = False) -> List[FsPath]:
    """Full paths of the entries of directory ``path``, sorted if asked."""
    entries = _list_dir(path)
    return sorted(entries) if sort else entries


def _absolute(path: PathSource) -> FsPath:
    p = FsPath(path)
    if p.is_absolute():
        return p
    return FsPath(os.getcwd()) / p


def simple_ls(path: Optional[PathSource] = None) -> LsSummary:
    """List ``path`` (made absolute; the current directory by default)."""
    p = FsPath(os.getcwd()) if path is None else _absolute(path)
    if not exists(p):
        raise FilesystemError("simple_ls", str(p), errno=_errno.ENOENT)
    if not is_directory(p):
        return LsSummary(p, False)
    summary = LsSummary(p, True)
    for entry in _list_dir(p):
        name = entry.filename().quoted()
        try:
            st = status(entry)
        except FilesystemError as exc:
            summary.err_count += 1
            summary.lines.append(f"{name} {exc}")
            continue
        if is_directory(st):
            summary.dir_count += 1
            summary.lines.append(f"{name} [directory]")
        elif is_regular_file(st):
            summary.file_count += 1
            summary.lines.append(name)
        else:
            summary.other_count += 1
            summary.lines.append(f"{name} [other]")
    return summary


def walk_tree(
    root: PathSource,
    max_level: Optional[int] = None,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[Tuple[int, FsPath]]:
    """Yield ``(level, path)`` for every entry below ``root``, depth first.

    Entries directly in ``root`` are at level 0. Symbolic links to
    directories are reported but not descended into. Directories at
    ``max_level`` are not descended into. Errors are passed to ``on_error``
    and the walk goes on; without a handler they are raised.
    """

    def handle(exc: FilesystemError) -> None:
        if on_error is None:
            raise exc
        on_error(exc)

    def walk(directory: FsPath, level: int) -> Iterator[Tuple[int, FsPath]]:
        try:
            entries = _list_dir(directory)
        except FilesystemError as exc:
            handle(exc)
            return
        for entry in entries:
            yield level, entry
            if max_level is not None and level >= max_level:
                continue
            try:
                descend = symlink_status(entry).type == FileType.DIRECTORY_FILE
            except FilesystemError as exc:
                handle(exc)
                continue
            if descend:
                yield from walk(entry, level + 1)

    yield from walk(FsPath(root), 0)


_SMILE = "\u263a"


def make_smile_files(directory: PathSource = ".") -> List[FsPath]:
    """Create empty files with plain and non-ASCII names in ``directory``."""
    base = FsPath(directory)
    names = [
        "smile",
        "smile" + _SMILE,
        "smile2",
        "smile2" + _SMILE,
        "".join(["s", "m", "i", "l", "e", "3"]),
        "".join(["s", "m", "i", "l", "e", "3", _SMILE]),
        "".join(["s", "m", "i", "l", "e", "4"]),
        "".join(["s", "m", "i", "l", "e", "4", _SMILE]),
    ]
    created = []
    for name in names:
        target = base / name
        try:
            with open(str(target), "w", encoding="utf-8"):
                pass
        except OSError as exc:
            raise FilesystemError("ofstream", str(target), errno=exc.errno or 0) from exc
        created.append(target)
    return created


def _remove_all(p: FsPath) -> None:
    text = str(p)
    if os.path.isdir(text) and not os.path.islink(text):
        shutil.rmtree(text)
    elif os.path.lexists(text):
        os.unlink(text)


def _write_text(p: FsPath, text: str) -> None:
    with open(str(p), "w", encoding="utf-8") as f:
        f.write(text)


def symlink_parent_resolution(base: PathSource) -> str:
    """Show how ``..`` after a directory symlink resolves.

    Builds ``dspr_demo/a/{c/d, b -> c/d}`` under ``base`` with a
    ``name.txt`` in ``a`` ("Windows") and in ``a/c`` ("POSIX"), then returns
    the content read through ``a/b/../name.txt``.
    """
    test_dir = FsPath(base) / "dspr_demo"
    try:
        _remove_all(test_dir)
        os.makedirs(str(test_dir / "a/c/d"))
        a = test_dir / "a"
        os.symlink("c/d", str(a / "b"), target_is_directory=True)
        _write_text(a / "name.txt", "Windows")
        _write_text(a / "c/name.txt", "POSIX")
        with open(str(test_dir / "a/b/../name.txt"), encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        if isinstance(exc, FilesystemError):
            raise
        raise FilesystemError(
            "symlink_parent_resolution", str(test_dir), errno=exc.errno or 0
        ) from exc


def _status_with_ec(path: FsPath, follow: bool) -> Tuple[FileStatus, int]:
    """Status of ``path`` and the error number the query reported (0 if none)."""
    try:
        st = status(path) if follow else symlink_status(path)
    except FilesystemError as exc:
        return FileStatus(), exc.errno or 0
    if st.type == FileType.FILE_NOT_FOUND:
        try:
            (os.stat if follow else os.lstat)(str(path))
        except OSError as exc:
            return st, exc.errno or _errno.ENOENT
        except ValueError:
            return st, _errno.EINVAL
        return st, _errno.ENOENT
    return st, 0


def _say(b: bool) -> str:
    return "true" if b else "false"


def _show_status(st: FileStatus, ec: int) -> List[str]:
    lines = []
    if ec:
        message = os.strerror(ec)
        lines += [
            "sets ec to indicate an error:",
            f"   ec.value() is {ec}",
            f'   ec.message() is "{message}"',
            f"   ec.default_error_condition().value() is {ec}",
            f'   ec.default_error_condition().message() is "{message}"',
        ]
    else:
        lines.append("clears ec.")
    lines += [
        f's.type() is {int(st.type)}, which is defined as "{st.type}"',
        f"exists(s) is {_say(exists(st))}",
        f"status_known(s) is {_say(status_known(st))}",
        f"is_regular_file(s) is {_say(is_regular_file(st))}",
        f"is_directory(s) is {_say(is_directory(st))}",
        f"is_other(s) is {_say(is_other(st))}",
        f"is_symlink(s) is {_say(is_symlink(st))}",
    ]
    return lines


def status_report(path: PathSource) -> str:
    """Report the status and symlink status of ``path`` and whether it exists."""
    p = FsPath(path)
    q = p.quoted()
    parts = []
    st, ec = _status_with_ec(p, follow=True)
    parts.append(f"\nfile_status s = status({q}, ec) " + "\n".join(_show_status(st, ec)))
    st, ec = _status_with_ec(p, follow=False)
    parts.append(
        f"\nfile_status s = symlink_status({q}, ec) " + "\n".join(_show_status(st, ec))
    )
    try:
        result = f"is {_say(exists(p))}"
    except FilesystemError as exc:
        result = f"throws a filesystem_error exception: {exc}"
    parts.append(f"\nexists({q}) {result}")
    return "\n".join(parts) + "\n"


def _report_fs_error(exc: FilesystemError) -> List[str]:
    return [
        "  threw filesystem_error exception:",
        f"    ex.code().value() is {exc.errno or 0}",
        f"    ex.code().category().name() is {_CATEGORY}",
        f"    ex.what() is {exc}",
    ]


def _report_status(st: FileStatus) -> List[str]:
    return [f"  file_status::type() is {st.type}"]


def _report_error_code(ec: int) -> List[str]:
    return [
        "  ec:",
        f"    value() is {ec}",
        f"    category().name() is {_CATEGORY}",
        f"    message() is {os.strerror(ec)}",
    ]


def error_report(path: PathSource) -> str:
    """Show how status, exists and directory iteration report errors for ``path``."""
    p = FsPath(path)
    text = str(p)
    out: List[str] = []

    out.append(f'\nstatus("{text}");')
    try:
        st = status(p)
    except FilesystemError as exc:
        out += _report_fs_error(exc)
        st = FileStatus()
    else:
        out.append("  Did not throw exception")
    out += _report_status(st)

    out.append(f'\nstatus("{text}", ec);')
    st, ec = _status_with_ec(p, follow=True)
    out += _report_status(st)
    out += _report_error_code(ec)

    out.append(f'\nexists("{text}");')
    try:
        found = exists(p)
    except FilesystemError as exc:
        out += _report_fs_error(exc)
    else:
        out += ["  Did not throw exception", f"  Returns: {_say(found)}"]

    out.append(f'\ndirectory_iterator("{text}");')
    try:
        entries = _list_dir(p)
    except FilesystemError as exc:
        out += _report_fs_error(exc)
    else:
        out.append("  Did not throw exception")
        out.append(f"  {'Equal' if not entries else 'Not equal'} to the end iterator")

    out.append(f'\ndirectory_iterator("{text}", ec);')
    try:
        entries = _list_dir(p)
        ec = 0
    except FilesystemError as exc:
        entries = []
        ec = exc.errno or 0
    out.append(f"  {'Equal' if not entries else 'Not equal'} to the end iterator")
    out += _report_error_code(ec)
    return "\n".join(out) + "\n"


# ----- command line -----


def _need_one(args: Sequence[str], usage: str) -> Optional[str]:
    if not args:
        print(usage)
        return None
    return args[0]


def _cmd_file_size(args: Sequence[str]) -> int:
    if len(args) != 1:
        print("Usage: file_size path")
        return 1
    arg = args[0]
    if not exists(arg):
        print(f"not found: {arg}")
        return 1
    if not is_regular_file(arg):
        print(f"not a regular file: {arg}")
        return 1
    print(f"size of {arg} is {file_size(arg)}")
    return 0


def _cmd_echo(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut0 path")
    if arg is None:
        return 1
    print(arg)
    return 0


def _cmd_size(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut1 path")
    if arg is None:
        return 1
    try:
        print(f"{arg} {file_size(arg)}")
    except FilesystemError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def _cmd_describe(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut2 path")
    if arg is None:
        return 1
    print(describe(arg))
    return 0


def _listing(args: Sequence[str], sort: bool, usage: str) -> int:
    arg = _need_one(args, usage)
    if arg is None:
        return 1
    p = FsPath(arg)
    try:
        if exists(p) and is_directory(p):
            print(f"{p.quoted()} is a directory containing:")
            for entry in list_directory(p, sort):
                shown = entry.filename() if sort else entry
                print(f"    {shown.quoted()}")
        else:
            print(describe(p))
    except FilesystemError as exc:
        print(exc)
    return 0


def _cmd_list(args: Sequence[str]) -> int:
    return _listing(args, False, "Usage: tut3 path")


def _cmd_sorted(args: Sequence[str]) -> int:
    return _listing(args, True, "Usage: tut4 path")


def _cmd_ls(args: Sequence[str]) -> int:
    if not args:
        print("\nusage:   simple_ls [path]")
    try:
        summary = simple_ls(args[0] if args else None)
    except FilesystemError as exc:
        print(f"\nNot found: {FsPath(exc.path1).quoted()}")
        return 1
    sys.stdout.write(summary.render())
    return 0


def _cmd_status(args: Sequence[str]) -> int:
    if args:
        target = args[0]
    else:
        print("Usage: file_status <path>")
        target = sys.argv[0]
    sys.stdout.write(status_report(target))
    return 0


def _cmd_errors(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: error_demo path")
    if arg is None:
        return 1
    sys.stdout.write(error_report(arg))
    return 0


def _cmd_smile(args: Sequence[str]) -> int:
    make_smile_files(args[0] if args else ".")
    return 0


def _print_entry(level: int, entry: FsPath) -> None:
    print("  " * (level + 1) + entry.quoted())


def _cmd_walk(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut6a path")
    if arg is None:
        return 1
    try:
        for level, entry in walk_tree(arg, max_level=1):
            _print_entry(level, entry)
    except (OSError, ValueError) as exc:
        print("************* exception *****************")
        print(exc)
    return 0


def _cmd_walk_all(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut6b path")
    if arg is None:
        return 1

    def report(exc: FilesystemError) -> None:
        print("************* filesystem_error *****************")
        print(exc)

    try:
        for level, entry in walk_tree(arg, on_error=report):
            _print_entry(level, entry)
    except (OSError, ValueError) as exc:
        print("************* exception *****************")
        print(exc)
    return 0


def _cmd_walk_quiet(args: Sequence[str]) -> int:
    arg = _need_one(args, "Usage: tut6c path")
    if arg is None:
        return 1
    for level, entry in walk_tree(arg, on_error=lambda exc: None):
        _print_entry(level, entry)
    return 0


def _cmd_dspr(args: Sequence[str]) -> int:
    print("POSIX API" if os.name == "posix" else "Windows API")
    print(symlink_parent_resolution(args[0] if args else os.getcwd()))
    return 0


_COMMANDS: Dict[str, Callable[[Sequence[str]], int]] = {
    "file_size": _cmd_file_size,
    "echo": _cmd_echo,
    "size": _cmd_size,
    "describe": _cmd_describe,
    "list": _cmd_list,
    "sorted": _cmd_sorted,
    "ls": _cmd_ls,
    "status": _cmd_status,
    "errors": _cmd_errors,
    "smile": _cmd_smile,
    "walk": _cmd_walk,
    "walk-all": _cmd_walk_all,
    "walk-quiet": _cmd_walk_quiet,
    "dspr": _cmd_dspr,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo named by the first argument; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in _COMMANDS:
        print("Usage: demos <command> [args...]")
        print("Commands: " + ", ".join(_COMMANDS))
        return 1
    return _COMMANDS[args[0]](args[1:])