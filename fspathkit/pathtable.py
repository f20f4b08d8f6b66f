"""Generate an HTML table showing how sample paths decompose.

Run once in POSIX mode to record the POSIX results, then in Windows mode to
produce a table in which cells that differ from the recorded POSIX results
are shaded and show both values.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .fspath import FsPath

EMPTY_MARKER = '<font size="-1"><i>empty</i></font>'
_SHADE_OPEN = '<span style="background-color: #CCFFCC">'

_USAGE = (
    'Usage: path_table "POSIX"|"Windows" input-file posix-file output-file\n'
    "Run on POSIX first, then on Windows\n"
    '  "POSIX" causes POSIX results to be saved in posix-file;\n'
    '  "Windows" causes POSIX results read from posix-file\n'
    "  input-file contains the paths to appear in the table.\n"
    "  posix-file will be used for POSIX results\n"
    "  output-file will contain the generated HTML.\n"
)

_PAGE_HEAD = (
    "<html>\n"
    "<head>\n"
    "<title>Path Decomposition Table</title>\n"
    "</head>\n"
    '<body bgcolor="#ffffff" text="#000000">\n'
)

_PAGE_TAIL = "</body>\n</html>\n"

_TABLE_HEAD = (
    "<h1>Path Decomposition Table</h1>\n"
    "<p>Shaded entries indicate cases where <i>POSIX</i> and <i>Windows</i>\n"
    "implementations yield different results. The top value is the\n"
    "<i>POSIX</i> result and the bottom value is the <i>Windows</i> result.\n"
    '<table border="1" cellspacing="0" cellpadding="5">\n'
    "<p>\n"
)


@dataclass(frozen=True)
class Column:
    """One column of the table: its heading and how a cell is computed."""

    heading: str
    compute: Callable[[FsPath], str]

    def cell_value(self, p: FsPath) -> str:
        """The text shown for path ``p`` in this column."""
        return self.compute(p)


def _elements(p: FsPath) -> str:
    return ",".join(str(element) for element in p)


_COLUMNS = (
    Column("Iteration<br>over<br>Elements", _elements),
    Column("<code>string()</code>", lambda p: p.native()),
    Column("<code>generic_<br>string()</code>", lambda p: p.generic_string()),
    Column("<code>root_<br>path()</code>", lambda p: str(p.root_path())),
    Column("<code>root_<br>name()</code>", lambda p: str(p.root_name())),
    Column("<code>root_<br>directory()</code>", lambda p: str(p.root_directory())),
    Column("<code>relative_<br>path()</code>", lambda p: str(p.relative_path())),
    Column("<code>parent_<br>path()</code>", lambda p: str(p.parent_path())),
    Column("<code>filename()</code>", lambda p: str(p.filename())),
)


def columns() -> List[Column]:
    """The table's columns, in display order."""
    return list(_COLUMNS)


def read_cases(lines: Iterable[str]) -> List[str]:
    """Test cases from input lines: trailing CR and newline removed, '#' lines skipped."""
    cases = []
    for line in lines:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        if not line or line[0] != "#":
            cases.append(line)
    return cases


def _cell(
    test_case: str,
    column: Column,
    posix: bool,
    recorded: List[str],
    posix_iter: Iterator[str],
) -> str:
    temp = column.cell_value(FsPath(test_case))
    value = EMPTY_MARKER if not temp else f"<code>{temp}</code>"
    if posix:
        recorded.append(value)
        return "<td></td>\n"
    previous = next(posix_iter, "").rstrip("\n")
    if value != previous:
        value = f"{_SHADE_OPEN}{previous}<br>{value}</span>"
    return f"<td>{value}</td>\n"


def render_table(
    cases: Sequence[str],
    posix: bool = True,
    posix_lines: Optional[Iterable[str]] = None,
) -> Tuple[str, List[str]]:
    """Render the table for ``cases``.

    Returns the HTML and, in POSIX mode, the cell values to be saved for a
    later Windows run. In Windows mode ``posix_lines`` supplies those values.
    """
    recorded: List[str] = []
    posix_iter = iter(posix_lines if posix_lines is not None else ())
    parts = [_TABLE_HEAD, "<tr><td><b>Constructor<br>argument</b></td>\n"]
    parts.extend(f"<td><b>{column.heading}</b></td>\n" for column in _COLUMNS)
    parts.append("</tr>\n")
    for test_case in cases:
        parts.append("<tr>\n")
        if not test_case:
            parts.append(f"<td>{EMPTY_MARKER}</td>\n")
        else:
            parts.append(f"<td><code>{test_case}</code></td>\n")
        for column in _COLUMNS:
            parts.append(_cell(test_case, column, posix, recorded, posix_iter))
        parts.append("</tr>\n")
    parts.append("</table>\n")
    return "".join(parts), recorded


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(_USAGE)
        return 1
    mode, input_file, posix_file, output_file = args

    try:
        with open(input_file, encoding="utf-8", newline="") as f:
            cases = read_cases(f.read().split("\n")[:-1] if False else f.read().splitlines())
    except OSError:
        print(f"Could not open input file: {input_file}", file=sys.stderr)
        return 1

    posix = mode == "POSIX"
    posix_lines: List[str] = []
    if not posix:
        try:
            with open(posix_file, encoding="utf-8") as f:
                posix_lines = f.read().splitlines()
        except OSError:
            print(f"Could not open POSIX input file: {posix_file}", file=sys.stderr)
            return 1

    table, recorded = render_table(cases, posix, posix_lines)

    if posix:
        try:
            with open(posix_file, "w", encoding="utf-8") as f:
                f.writelines(f"{value}\n" for value in recorded)
        except OSError:
            print(f"Could not open POSIX output file: {posix_file}", file=sys.stderr)
            return 1

    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(_PAGE_HEAD + table + _PAGE_TAIL)
    except OSError:
        print(f"Could not open output file: {output_file}", file=sys.stderr)
        return 1
    return 0