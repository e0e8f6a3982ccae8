"""Error type shared by the merge pipeline."""
from __future__ import annotations


class MergeError(RuntimeError):
    """Fatal failure of a merge run.

    ``kind`` names the stage that failed: ``config``, ``discovery``,
    ``empty``, ``manifest`` or ``ffmpeg``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def is_validation(self) -> bool:
        return self.kind == "config"

    def __str__(self) -> str:
        return self.message
