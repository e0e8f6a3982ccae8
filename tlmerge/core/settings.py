"""Run configuration and filesystem settings for a merge."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from .errors import MergeError

VIDEOS_DIR = "videos"
VIDEO_EXT = ".mp4"
MANIFEST_NAME = "inputs.txt"
OUTPUT_SUFFIX = "_merged_timelapse"

MIN_SPEED = 0.1
MAX_SPEED = 1000.0
DEFAULT_SPEED = 10.0

# characters replaced by "_" in the output filename
_INVALID_FILENAME_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|", " ")


def sanitize_filename(name: str) -> str:
    """Replace filesystem-hostile characters in *name* with underscores."""
    result = name
    for char in _INVALID_FILENAME_CHARS:
        result = result.replace(char, "_")
    return result.strip()


@dataclass(frozen=True)
class MergeSettings:
    """Where videos are read from and where the manifest/output land."""

    work_dir: Path = Path(".")
    videos_dir_name: str = VIDEOS_DIR
    video_ext: str = VIDEO_EXT
    manifest_name: str = MANIFEST_NAME

    @property
    def videos_dir(self) -> Path:
        return Path(self.work_dir) / self.videos_dir_name

    @property
    def manifest_path(self) -> Path:
        return Path(self.work_dir) / self.manifest_name

    def output_name(self, camera: str) -> str:
        return f"{sanitize_filename(camera)}{OUTPUT_SUFFIX}{self.video_ext}"

    def output_path(self, camera: str) -> Path:
        return Path(self.work_dir) / self.output_name(camera)


@dataclass(frozen=True)
class RunConfiguration:
    """User options for one run. Validated on construction."""

    camera: str
    ffmpeg_path: str = "ffmpeg"
    use_gpu: bool = True
    speed: float = DEFAULT_SPEED

    def __post_init__(self) -> None:
        if not self.camera or not self.camera.strip():
            raise MergeError("config", "--camera is required")
        if not self.ffmpeg_path:
            raise MergeError("config", "ffmpeg path must not be empty")
        # also rejects NaN
        if not (MIN_SPEED <= self.speed <= MAX_SPEED):
            raise MergeError(
                "config",
                f"speed factor must be between {MIN_SPEED:.1f} and {MAX_SPEED:.1f}",
            )

    @property
    def rescale_factor(self) -> float:
        """Timestamp multiplier applied to every frame (``1 / speed``)."""
        return 1.0 / self.speed
