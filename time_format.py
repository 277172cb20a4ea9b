# time_format.py
from __future__ import annotations
import re
from enum import Enum
from typing import List, Tuple


class FormatError(ValueError):
    """raised when a duration string is neither HH:MM:SS nor MM:SS"""


class TimeFormat(Enum):
    """shape of the input duration string, used to pick the output width"""
    MMSS = "mm:ss"
    HHMMSS = "hh:mm:ss"


# checked in this order
_PATTERNS = (
    (TimeFormat.HHMMSS, re.compile(r"^\d{2}:\d{2}:\d{2}$", re.ASCII)),
    (TimeFormat.MMSS, re.compile(r"^\d{2}:\d{2}$", re.ASCII)),
)


def detect_format(text: str) -> TimeFormat:
    """
    return which shape the string has
    raise FormatError if it matches none
    """
    if isinstance(text, str):
        for fmt, pattern in _PATTERNS:
            # fullmatch: "$" alone would accept a trailing newline
            if pattern.fullmatch(text):
                return fmt
    raise FormatError(f"Unsupported time format: {text!r} (expected HH:MM:SS or MM:SS)")


def parse(text: str) -> Tuple[int, TimeFormat]:
    """
    parse 'HH:MM:SS' or 'MM:SS' into (total seconds, format)
    fields are not range checked, '00:99' is 99 seconds
    """
    fmt = detect_format(text)
    parts = [int(p, 10) for p in text.split(":")]
    if fmt is TimeFormat.MMSS:
        hours = 0
        minutes, seconds = parts
    else:
        hours, minutes, seconds = parts
    return hours * 3600 + minutes * 60 + seconds, fmt


def _fields(seconds: int, fmt: TimeFormat) -> List[int]:
    if fmt is TimeFormat.MMSS:
        mm, ss = divmod(seconds, 60)
        return [mm, ss]
    hh, rem = divmod(seconds, 3600)
    mm, ss = divmod(rem, 60)
    return [hh, mm, ss]


def format(seconds: int, fmt: TimeFormat) -> str:
    """format seconds as MM:SS or HH:MM:SS, negatives render as zero"""
    seconds = max(0, int(seconds))
    return ":".join(f"{v:02d}" for v in _fields(seconds, fmt))
