"""Build and run the ffmpeg command that merges and speeds up segments."""
from __future__ import annotations
import shlex
import subprocess
from pathlib import Path
from typing import Dict, List, Tuple

from .errors import MergeError
from .settings import RunConfiguration

# encoder name and quality flags, keyed by use_gpu
ENCODERS: Dict[bool, Tuple[str, List[str]]] = {
    True: ("h264_nvenc", ["-preset", "p4", "-cq", "23"]),
    False: ("libx264", ["-preset", "medium", "-crf", "23"]),
}
PIXEL_FORMAT = "yuv420p"


def speed_filter(rescale_factor: float) -> str:
    return f"[0:v]setpts={rescale_factor:.6f}*PTS[v]"


def build_ffmpeg_command(
    config: RunConfiguration,
    manifest_path: str | Path,
    output_path: str | Path,
) -> List[str]:
    """Return the argument vector for one merge.

    The manifest is read with the concat demuxer (``-safe 0`` so absolute
    paths are accepted), every frame timestamp is scaled by ``1 / speed``
    and any existing *output_path* is overwritten.
    """
    encoder, quality = ENCODERS[config.use_gpu]
    return [
        config.ffmpeg_path,
        "-f", "concat",
        "-safe", "0",
        "-i", str(manifest_path),
        "-filter_complex", speed_filter(config.rescale_factor),
        "-map", "[v]",
        "-c:v", encoder,
        *quality,
        "-pix_fmt", PIXEL_FORMAT,
        "-y", str(output_path),
    ]


def describe_encoder(config: RunConfiguration) -> str:
    if config.use_gpu:
        return f"Running ffmpeg with GPU acceleration from: {config.ffmpeg_path}"
    return f"Running ffmpeg with software encoding from: {config.ffmpeg_path}"


def run_ffmpeg(cmd: List[str]) -> None:
    """Run *cmd* in the foreground; ffmpeg writes straight to our terminal."""
    print("Running:", shlex.join(cmd))
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise MergeError("ffmpeg", f"running ffmpeg: {exc}") from exc
    if result.returncode != 0:
        raise MergeError(
            "ffmpeg", f"running ffmpeg: exit status {result.returncode}"
        )


__all__ = [
    "ENCODERS",
    "PIXEL_FORMAT",
    "speed_filter",
    "build_ffmpeg_command",
    "describe_encoder",
    "run_ffmpeg",
]
