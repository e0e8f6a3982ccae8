"""Core timelapse merge utilities package."""

from . import (
    errors,
    settings,
    timestamps,
    discovery,
    sequencer,
    manifest,
    transcode,
    merge,
)

__all__ = [
    "errors",
    "settings",
    "timestamps",
    "discovery",
    "sequencer",
    "manifest",
    "transcode",
    "merge",
]
