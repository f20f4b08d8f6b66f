"""Lexical path values: decomposition, composition, comparison and normalisation.

Paths are handled purely as strings in the generic slash-separated format;
nothing here touches the filesystem. Paths are immutable, so every modifier
returns a new path.
"""

from __future__ import annotations

import os
from functools import total_ordering
from typing import Iterable, Iterator, List, Optional, Union

from .pathparse import (
    DOT,
    PREFERRED_SEPARATOR,
    is_directory_separator,
    is_element_separator,
    iter_elements,
    needs_separator,
    parent_path_end,
    root_directory_start,
    root_name_end,
)

_DOT_DOT = DOT + DOT

PathSource = Union[str, bytes, "os.PathLike[str]", "FsPath", Iterable[str]]


def _plain_text(source: object) -> Optional[str]:
    """Text of a string-like source, or None if it is not one."""
    if isinstance(source, FsPath):
        return source._text
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return os.fsdecode(bytes(source))
    if isinstance(source, os.PathLike):
        return os.fsdecode(os.fspath(source))
    return None


def _text_of(source: object) -> str:
    text = _plain_text(source)
    if text is not None:
        return text
    if isinstance(source, Iterable):
        chars = list(source)
        if all(isinstance(c, str) for c in chars):
            return "".join(chars)
    raise TypeError(f"cannot make a path from {type(source).__name__}")


def _lex_compare(first: List[str], second: List[str]) -> int:
    for a, b in zip(first, second):
        if a < b:
            return -1
        if b < a:
            return 1
    if len(first) == len(second):
        return 0
    return -1 if len(first) < len(second) else 1


@total_ordering
class FsPath:
    """An immutable path in the generic format."""

    __slots__ = ("_text",)

    def __init__(self, source: PathSource = "") -> None:
        self._text = _text_of(source)

    # ----- observers -----

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FsPath({self._text!r})"

    def __fspath__(self) -> str:
        return self._text

    def native(self) -> str:
        """The path string in native format."""
        return self._text

    def generic_string(self) -> str:
        """The path string in generic format (slash separators)."""
        return self._text

    def quoted(self) -> str:
        """The path in double quotes, with '"' and '&' escaped by '&'."""
        body = self._text.replace("&", "&&").replace('"', '&"')
        return f'"{body}"'

    # ----- composition -----

    def concat(self, other: PathSource) -> "FsPath":
        """Return this path with ``other`` appended, no separator added."""
        return FsPath(self._text + _text_of(other))

    def append(self, other: PathSource) -> "FsPath":
        """Return this path joined with ``other``, adding a separator if needed."""
        text = _text_of(other)
        if not text:
            return FsPath(self._text)
        if is_directory_separator(text[0]) or not needs_separator(self._text):
            return FsPath(self._text + text)
        return FsPath(self._text + PREFERRED_SEPARATOR + text)

    def __truediv__(self, other: PathSource) -> "FsPath":
        try:
            return self.append(other)
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: PathSource) -> "FsPath":
        try:
            return FsPath(other).append(self)
        except TypeError:
            return NotImplemented

    def __add__(self, other: PathSource) -> "FsPath":
        try:
            return self.concat(other)
        except TypeError:
            return NotImplemented

    # ----- modifiers (returning new paths) -----

    def clear(self) -> "FsPath":
        """Return an empty path."""
        return FsPath()

    def make_preferred(self) -> "FsPath":
        """Return the path with preferred separators (unchanged here)."""
        return FsPath(self._text)

    def remove_filename(self) -> "FsPath":
        """Return the path with its last element removed."""
        end = parent_path_end(self._text)
        if end is None:
            return FsPath(self._text)
        return FsPath(self._text[:end])

    def replace_extension(self, new_extension: PathSource = "") -> "FsPath":
        """Return the path with its extension replaced by ``new_extension``."""
        ext = self.extension()._text
        text = self._text[: len(self._text) - len(ext)]
        new = _text_of(new_extension)
        if new:
            if new[0] != DOT:
                text += DOT
            text += new
        return FsPath(text)

    # ----- decomposition -----

    def _elements(self) -> List[str]:
        return list(iter_elements(self._text))

    def root_name(self) -> "FsPath":
        """The network root name, such as ``//host``, or an empty path."""
        return FsPath(self._text[: root_name_end(self._text)])

    def root_directory(self) -> "FsPath":
        """The root directory separator, or an empty path."""
        pos = root_directory_start(self._text)
        if pos is None:
            return FsPath()
        return FsPath(self._text[pos:pos + 1])

    def root_path(self) -> "FsPath":
        """Root name followed by root directory."""
        return FsPath(self.root_name()._text + self.root_directory()._text)

    def relative_path(self) -> "FsPath":
        """Everything after the root path."""
        text = self._text
        pos = root_name_end(text)
        while pos < len(text) and is_directory_separator(text[pos]):
            pos += 1
        return FsPath(text[pos:])

    def parent_path(self) -> "FsPath":
        """The path without its last element."""
        end = parent_path_end(self._text)
        if end is None:
            return FsPath()
        return FsPath(self._text[:end])

    def filename(self) -> "FsPath":
        """The last element; ``.`` for a trailing separator."""
        elements = self._elements()
        return FsPath(elements[-1] if elements else "")

    def stem(self) -> "FsPath":
        """The filename without its extension."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return FsPath(name)
        pos = name.rfind(DOT)
        return FsPath(name if pos < 0 else name[:pos])

    def extension(self) -> "FsPath":
        """The filename from its last dot on, or an empty path."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return FsPath()
        pos = name.rfind(DOT)
        return FsPath() if pos < 0 else FsPath(name[pos:])

    # ----- queries -----

    def empty(self) -> bool:
        return not self._text

    def filename_is_dot(self) -> bool:
        return self.filename()._text == DOT

    def filename_is_dot_dot(self) -> bool:
        text = self._text
        return (
            len(text) >= 2
            and text.endswith(_DOT_DOT)
            and (len(text) == 2 or is_element_separator(text[-3]))
        )

    def has_root_path(self) -> bool:
        return self.has_root_directory() or self.has_root_name()

    def has_root_name(self) -> bool:
        return not self.root_name().empty()

    def has_root_directory(self) -> bool:
        return not self.root_directory().empty()

    def has_relative_path(self) -> bool:
        return not self.relative_path().empty()

    def has_parent_path(self) -> bool:
        return not self.parent_path().empty()

    def has_filename(self) -> bool:
        return bool(self._text)

    def has_stem(self) -> bool:
        return not self.stem().empty()

    def has_extension(self) -> bool:
        return not self.extension().empty()

    def is_absolute(self) -> bool:
        return self.has_root_directory()

    def is_relative(self) -> bool:
        return not self.is_absolute()

    # ----- lexical operations -----

    def lexically_normal(self) -> "FsPath":
        """Remove redundant ``.`` and ``name/..`` elements, without I/O."""
        if not self._text:
            return FsPath()
        elements = self._elements()
        last = len(elements) - 1
        temp = FsPath()
        for index, element in enumerate(elements):
            if element == DOT and index != 0 and index != last:
                continue
            if not temp.empty() and element == _DOT_DOT:
                lf = temp.filename()._text
                removable = (
                    len(lf) > 0
                    and (len(lf) != 1 or (lf[0] != DOT and not is_directory_separator(lf[0])))
                    and (len(lf) != 2 or (lf[0] != DOT and lf[1] != DOT))
                )
                if removable:
                    temp = temp.remove_filename()
                    if temp.empty() and index + 1 == last and elements[last] == DOT:
                        temp = temp / DOT
                    continue
            temp = temp / element
        if temp.empty():
            temp = temp / DOT
        return temp

    def lexically_relative(self, base: PathSource) -> "FsPath":
        """The path that leads from ``base`` to this path, or empty if none."""
        mine = self._elements()
        theirs = FsPath(base)._elements()
        common = 0
        for a, b in zip(mine, theirs):
            if a != b:
                break
            common += 1
        if common == 0:
            return FsPath()
        if common == len(mine) and common == len(theirs):
            return FsPath(DOT)
        result = FsPath()
        for _ in theirs[common:]:
            result = result / _DOT_DOT
        for element in mine[common:]:
            result = result / element
        return result

    def lexically_proximate(self, base: PathSource) -> "FsPath":
        """The relative path from ``base`` if there is one, else this path."""
        rel = self.lexically_relative(base)
        return FsPath(self._text) if rel.empty() else rel

    # ----- iteration -----

    def __iter__(self) -> Iterator["FsPath"]:
        for element in iter_elements(self._text):
            yield FsPath(element)

    def __reversed__(self) -> Iterator["FsPath"]:
        for element in reversed(self._elements()):
            yield FsPath(element)

    def __len__(self) -> int:
        """Number of elements."""
        return len(self._elements())

    # ----- comparison -----

    def compare(self, other: PathSource) -> int:
        """Element-wise comparison: negative, zero or positive."""
        return _lex_compare(self._elements(), FsPath(other)._elements())

    def __eq__(self, other: object) -> bool:
        text = _plain_text(other)
        if text is None:
            return NotImplemented
        return self.compare(text) == 0

    def __lt__(self, other: object) -> bool:
        text = _plain_text(other)
        if text is None:
            return NotImplemented
        return self.compare(text) < 0

    def __hash__(self) -> int:
        return hash(tuple(self._elements()))


def _element_texts(seq: object) -> List[str]:
    if isinstance(seq, FsPath):
        return seq._elements()
    return [_text_of(e) for e in seq]  # type: ignore[attr-defined]


def lexicographical_compare(first: object, second: object) -> bool:
    """True if the elements of ``first`` order before those of ``second``."""
    return _lex_compare(_element_texts(first), _element_texts(second)) < 0