"""tlmerge package."""

from .core import (
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
