"""Locate the segment files recorded by one camera."""
from __future__ import annotations
import os
import stat
from typing import List, NoReturn

from .settings import MergeSettings


def _raise(err: OSError) -> NoReturn:
    raise err


def _is_regular_file(path: str) -> bool:
    return stat.S_ISREG(os.lstat(path).st_mode)


def find_video_files(camera: str, settings: MergeSettings | None = None) -> List[str]:
    """Return absolute paths of ``settings.videos_dir`` files recorded by *camera*.

    A file matches when its lower-cased name ends with the video extension
    and its base name starts with *camera* (case-sensitive). Directories
    are walked in lexical order. Walk errors such as a missing root are
    re-raised unchanged; an empty list is not an error here.
    """
    settings = settings or MergeSettings()
    ext = settings.video_ext.lower()
    files: List[str] = []
    for root, dirs, names in os.walk(settings.videos_dir, onerror=_raise):
        dirs.sort()
        for name in sorted(names):
            path = os.path.join(root, name)
            if not name.lower().endswith(ext):
                continue
            if not name.startswith(camera):
                continue
            if not _is_regular_file(path):
                continue
            files.append(os.path.abspath(path))
    return files


__all__ = ["find_video_files"]
