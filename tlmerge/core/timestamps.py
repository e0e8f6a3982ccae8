"""Ordering keys derived from segment filenames.

Unifi Protect exports are named like::

    G5 Flex 12-30-2025, 21.00.00 GMT+1 - 12-31-2025, 03.00.00 GMT+1.mp4

The first ``M-D-YYYY, HH.MM.SS`` (or ``HH:MM:SS``) in the name is the
start of the segment. The timezone suffix is ignored and the result is a
naive datetime. When the name carries no usable timestamp the file's
modification time is used, and when that is unavailable too the key is
``UNKNOWN``, which sorts after every real instant.
"""
from __future__ import annotations
import os
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

DATE_TIME_PATTERN = re.compile(
    r"(\d{1,2})-(\d{1,2})-(\d{4}),\s+(\d{2})[.:](\d{2})[.:](\d{2})",
    re.ASCII,
)
DATE_TIME_FORMAT = "%m-%d-%Y, %H:%M:%S"


class KeySource(str, Enum):
    FILENAME = "filename"
    MTIME = "mtime"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class OrderingKey:
    instant: Optional[datetime]
    source: KeySource

    def sort_value(self) -> Tuple[int, datetime]:
        if self.instant is None:
            return (1, datetime.min)
        return (0, self.instant)


UNKNOWN_KEY = OrderingKey(None, KeySource.UNKNOWN)


def parse_filename_timestamp(filename: str) -> Optional[datetime]:
    """Return the first embedded date-time in *filename*, or ``None``."""
    m = DATE_TIME_PATTERN.search(filename)
    if not m:
        return None
    month, day, year, hh, mm, ss = m.groups()
    text = f"{month}-{day}-{year}, {hh}:{mm}:{ss}"
    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)
    except ValueError:
        return None


def from_filename(path: str) -> Optional[OrderingKey]:
    instant = parse_filename_timestamp(os.path.basename(path))
    if instant is None:
        return None
    return OrderingKey(instant, KeySource.FILENAME)


def from_mtime(path: str) -> Optional[OrderingKey]:
    try:
        instant = datetime.fromtimestamp(os.stat(path).st_mtime)
    except (OSError, OverflowError, ValueError):
        return None
    return OrderingKey(instant, KeySource.MTIME)


STRATEGIES: Tuple[Callable[[str], Optional[OrderingKey]], ...] = (
    from_filename,
    from_mtime,
)


def extract_key(path: str) -> OrderingKey:
    """Return the ordering key for *path*. Never raises."""
    for strategy in STRATEGIES:
        key = strategy(path)
        if key is not None:
            return key
    return UNKNOWN_KEY


def extract_date(path: str) -> Optional[datetime]:
    """Return the instant used to order *path* (``None`` when unknown)."""
    return extract_key(path).instant


__all__ = [
    "DATE_TIME_PATTERN",
    "KeySource",
    "OrderingKey",
    "UNKNOWN_KEY",
    "parse_filename_timestamp",
    "from_filename",
    "from_mtime",
    "extract_key",
    "extract_date",
]
