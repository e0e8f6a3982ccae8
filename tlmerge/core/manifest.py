"""ffmpeg concat-demuxer manifest (``inputs.txt``).

Each line has the form ``file '<path>'``. Paths use forward slashes and
a literal ``'`` is written as ``'\\''`` (close quote, escaped quote,
reopen quote). Filename bytes that are not valid UTF-8 are written back
unchanged.
"""
from __future__ import annotations
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List

from .errors import MergeError

_QUOTE = "'"
_ESCAPED_QUOTE = "'\\''"


def escape_path(path: str) -> str:
    normalized = path.replace("\\", "/")
    return normalized.replace(_QUOTE, _ESCAPED_QUOTE)


def unescape_path(entry: str) -> str:
    return entry.replace(_ESCAPED_QUOTE, _QUOTE)


def format_entry(path: str) -> str:
    return f"file '{escape_path(path)}'"


def write_manifest(paths: Iterable[str], manifest_path: str | Path) -> Path:
    """Write *paths* to *manifest_path*, truncating any previous content."""
    manifest_path = Path(manifest_path)
    try:
        with manifest_path.open(
            "w", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as fh:
            for path in paths:
                fh.write(format_entry(path) + "\n")
    except (OSError, UnicodeError) as exc:
        raise MergeError("manifest", f"creating {manifest_path.name}: {exc}") from exc
    return manifest_path


def read_manifest(manifest_path: str | Path) -> List[str]:
    """Return the paths listed in a manifest written by :func:`write_manifest`."""
    paths: List[str] = []
    for line in Path(manifest_path).read_text(
        encoding="utf-8", errors="surrogateescape"
    ).splitlines():
        line = line.strip()
        if not line.startswith("file '") or not line.endswith(_QUOTE):
            continue
        paths.append(unescape_path(line[len("file '"):-1]))
    return paths


def remove_manifest(manifest_path: str | Path) -> bool:
    """Delete the manifest; report a warning on stderr instead of raising."""
    manifest_path = Path(manifest_path)
    try:
        manifest_path.unlink()
    except FileNotFoundError:
        return True
    except OSError as exc:
        print(
            f"Warning: failed to remove temporary file {manifest_path}: {exc}",
            file=sys.stderr,
        )
        return False
    return True


@contextmanager
def manifest_file(paths: Iterable[str], manifest_path: str | Path) -> Iterator[Path]:
    """Write the manifest for the duration of the ``with`` block.

    The file is removed on exit, including when writing it failed halfway
    or the body raised.
    """
    manifest_path = Path(manifest_path)
    try:
        yield write_manifest(paths, manifest_path)
    finally:
        remove_manifest(manifest_path)


__all__ = [
    "escape_path",
    "unescape_path",
    "format_entry",
    "write_manifest",
    "read_manifest",
    "remove_manifest",
    "manifest_file",
]
