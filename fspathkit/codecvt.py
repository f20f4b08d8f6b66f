"""Result codes of character conversion and their error category."""

from __future__ import annotations

from enum import IntEnum

_CATEGORY_NAME = "codecvt"


class CodecvtResult(IntEnum):
    """Outcome of a character-set conversion step."""

    OK = 0
    PARTIAL = 1
    ERROR = 2
    NOCONV = 3

    @property
    def message(self) -> str:
        """Short description of this result."""
        return codecvt_message(self)


_MESSAGES = {
    CodecvtResult.OK: "ok",
    CodecvtResult.PARTIAL: "partial",
    CodecvtResult.ERROR: "error",
    CodecvtResult.NOCONV: "noconv",
}


def codecvt_message(ev: int) -> str:
    """Return the message for conversion result value ``ev``."""
    try:
        return _MESSAGES[CodecvtResult(ev)]
    except ValueError:
        return "unknown error"


def category_name() -> str:
    """Return the name of the conversion error category."""
    return _CATEGORY_NAME