"""Low-level parsing of path strings in the generic (slash-separated) format.

A path is split into an optional root name (a network name such as
``//host``), an optional root directory (``/``) and a sequence of filenames.
A trailing separator is reported as a final ``"."`` element.
"""

from __future__ import annotations

from typing import Iterator, Optional

SEPARATOR = "/"
PREFERRED_SEPARATOR = "/"
DOT = "."


def is_directory_separator(c: str) -> bool:
    """True if ``c`` separates directories in a path."""
    return c == SEPARATOR


def is_element_separator(c: str) -> bool:
    """True if ``c`` separates path elements."""
    return c == SEPARATOR


def _find_separator(text: str, start: int) -> Optional[int]:
    pos = text.find(SEPARATOR, start)
    return None if pos < 0 else pos


def _root_directory_start(text: str, size: int) -> Optional[int]:
    # "//" alone is a root name with no root directory
    if size == 2 and is_directory_separator(text[0]) and is_directory_separator(text[1]):
        return None
    # "//net {/}"
    if (
        size > 3
        and is_directory_separator(text[0])
        and is_directory_separator(text[1])
        and not is_directory_separator(text[2])
    ):
        pos = _find_separator(text, 2)
        return pos if pos is not None and pos < size else None
    # "/"
    if size > 0 and is_directory_separator(text[0]):
        return 0
    return None


def _filename_pos(text: str, end_pos: int) -> int:
    # "//" is all root name
    if end_pos == 2 and is_directory_separator(text[0]) and is_directory_separator(text[1]):
        return 0
    # a trailing separator is its own filename position
    if end_pos and is_directory_separator(text[end_pos - 1]):
        return end_pos - 1
    pos = text.rfind(SEPARATOR, 0, end_pos) if end_pos else text.rfind(SEPARATOR)
    if pos < 0 or (pos == 1 and is_directory_separator(text[0])):
        return 0
    return pos + 1


def _is_root_separator(text: str, pos: int) -> bool:
    """True if the separator at ``pos`` is the root directory."""
    while pos > 0 and is_directory_separator(text[pos - 1]):
        pos -= 1
    if pos == 0:
        return True
    # "//" name "/"
    if pos < 3 or not is_directory_separator(text[0]) or not is_directory_separator(text[1]):
        return False
    return _find_separator(text, 2) == pos


def _first_element(text: str) -> tuple[int, int]:
    """Position and length of the first element of a non-empty ``text``."""
    size = len(text)
    cur = 0
    element_pos = 0
    element_size = 0
    if (
        size >= 2
        and is_directory_separator(text[0])
        and is_directory_separator(text[1])
        and (size == 2 or not is_directory_separator(text[2]))
    ):
        cur += 2
        element_size += 2
    elif is_directory_separator(text[0]):
        # skip redundant leading separators; the last one is the root directory
        while cur + 1 < size and is_directory_separator(text[cur + 1]):
            cur += 1
            element_pos += 1
        return element_pos, 1
    while cur < size and not is_directory_separator(text[cur]):
        cur += 1
        element_size += 1
    return element_pos, element_size


def root_name_end(text: str) -> int:
    """Length of the root name at the start of ``text`` (0 if there is none)."""
    if not text:
        return 0
    pos, size = _first_element(text)
    element = text[pos:pos + size]
    if (
        pos != len(text)
        and len(element) > 1
        and is_directory_separator(element[0])
        and is_directory_separator(element[1])
    ):
        return pos + size
    return 0


def root_directory_start(text: str) -> Optional[int]:
    """Index of the root directory separator in ``text``, or None."""
    return _root_directory_start(text, len(text))


def filename_start(text: str) -> int:
    """Index at which the last element of ``text`` begins."""
    return _filename_pos(text, len(text))


def parent_path_end(text: str) -> Optional[int]:
    """Length of the parent path prefix of ``text``, or None if it has none."""
    end_pos = _filename_pos(text, len(text))
    filename_was_separator = bool(text) and is_directory_separator(text[end_pos])
    root_dir_pos = _root_directory_start(text, end_pos)
    while (
        end_pos > 0
        and end_pos - 1 != root_dir_pos
        and is_directory_separator(text[end_pos - 1])
    ):
        end_pos -= 1
    if end_pos == 1 and root_dir_pos == 0 and filename_was_separator:
        return None
    return end_pos


def iter_elements(text: str) -> Iterator[str]:
    """Yield the elements of ``text``: root name, root directory, filenames."""
    if not text:
        return
    size = len(text)
    pos, length = _first_element(text)
    element = text[pos:pos + length]
    yield element
    while True:
        pos += len(element)
        if pos >= size:
            return
        was_net = (
            len(element) > 2
            and is_directory_separator(element[0])
            and is_directory_separator(element[1])
            and not is_directory_separator(element[2])
        )
        if is_directory_separator(text[pos]):
            if was_net:
                element = SEPARATOR
                yield element
                continue
            while pos != size and is_directory_separator(text[pos]):
                pos += 1
            if pos == size and not _is_root_separator(text, pos - 1):
                pos -= 1
                element = DOT
                yield element
                continue
            if pos == size:
                return
        end = _find_separator(text, pos)
        element = text[pos:] if end is None else text[pos:end]
        yield element


def needs_separator(text: str) -> bool:
    """True if appending to ``text`` requires a separator first."""
    return bool(text) and not is_directory_separator(text[-1])