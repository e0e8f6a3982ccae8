"""Chronological ordering of discovered segments."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from .timestamps import OrderingKey, extract_key


@dataclass(frozen=True)
class VideoFile:
    path: str
    key: OrderingKey


def sequence_files(paths: Iterable[str]) -> List[VideoFile]:
    """Return *paths* as :class:`VideoFile` objects sorted by ordering key.

    The sort is stable, so files sharing a key keep their discovery order.
    """
    files = [VideoFile(p, extract_key(p)) for p in paths]
    return sorted(files, key=lambda f: f.key.sort_value())


def ordered_paths(files: Iterable[VideoFile]) -> List[str]:
    return [f.path for f in files]


__all__ = ["VideoFile", "sequence_files", "ordered_paths"]
