"""Report the decomposition of a composed path, and the stems of a filename."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from .fspath import FsPath, PathSource

_USAGE = (
    "Usage: path_info path-element [path-element...]\n"
    "Composes a path via operator/= from one or more path-element arguments\n"
    "Example: path_info foo/bar baz\n"
    "         would report info about the composed path foo/bar/baz\n"
)


def _query_lines(p: FsPath) -> List[str]:
    queries = [
        ("empty()--------------", p.empty()),
        ("is_absolute()--------", p.is_absolute()),
        ("has_root_name()------", p.has_root_name()),
        ("has_root_directory()-", p.has_root_directory()),
        ("has_root_path()------", p.has_root_path()),
        ("has_relative_path()--", p.has_relative_path()),
        ("has_parent_path()----", p.has_parent_path()),
        ("has_filename()-------", p.has_filename()),
        ("has_stem()-----------", p.has_stem()),
        ("has_extension()------", p.has_extension()),
    ]
    return [f"  {label}: {'true' if value else 'false'}" for label, value in queries]


def compose(elements: Iterable[PathSource]) -> FsPath:
    """Join ``elements`` into one path, adding separators as needed."""
    p = FsPath()
    for element in elements:
        p = p / element
    return p


def path_report(p: PathSource) -> str:
    """Multi-line report of the observers, decomposition and queries of ``p``."""
    p = FsPath(p)
    preferred = p.make_preferred()
    lines = [
        "",
        "composed path:",
        f"  operator<<()---------: {p.quoted()}",
        f"  make_preferred()-----: {preferred.quoted()}",
        "",
        "elements:",
    ]
    p = preferred
    lines.extend(f"  {element.quoted()}" for element in p)
    lines += [
        "",
        "observers, native format:",
        f"  native()-------------: {p.native()}",
        f"  c_str()--------------: {p.native()}",
        f"  string()-------------: {p}",
        f"  wstring()------------: {p}",
        "",
        "observers, generic format:",
        f"  generic_string()-----: {p.generic_string()}",
        f"  generic_wstring()----: {p.generic_string()}",
        "",
        "decomposition:",
        f"  root_name()----------: {p.root_name().quoted()}",
        f"  root_directory()-----: {p.root_directory().quoted()}",
        f"  root_path()----------: {p.root_path().quoted()}",
        f"  relative_path()------: {p.relative_path().quoted()}",
        f"  parent_path()--------: {p.parent_path().quoted()}",
        f"  filename()-----------: {p.filename().quoted()}",
        f"  stem()---------------: {p.stem().quoted()}",
        f"  extension()----------: {p.extension().quoted()}",
        "",
        "query:",
    ]
    lines += _query_lines(p)
    return "\n".join(lines) + "\n"


def stem_chain(p: PathSource) -> List[Tuple[FsPath, FsPath, FsPath]]:
    """(name, stem, extension) for the filename of ``p`` and each successive stem."""
    name = FsPath(p).filename()
    chain = []
    while True:
        stem, extension = name.stem(), name.extension()
        chain.append((name, stem, extension))
        if stem.empty() or extension.empty():
            return chain
        name = stem


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the report for the path composed from the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(_USAGE)
        return 1
    sys.stdout.write(path_report(compose(args)))
    return 0


def stems_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the stem and extension of a path's filename, repeatedly."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write("Usage: stems <path>\n")
        return 1
    for name, stem, extension in stem_chain(args[0]):
        print(
            f"filename {name.quoted()} has stem {stem.quoted()}"
            f" and extension {extension.quoted()}"
        )
    return 0