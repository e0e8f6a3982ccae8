"""Merge every segment of one camera into a single sped-up timelapse."""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from . import discovery, manifest, sequencer, transcode
from .errors import MergeError
from .settings import MergeSettings, RunConfiguration


def merge_timelapse(
    config: RunConfiguration,
    settings: Optional[MergeSettings] = None,
) -> Path:
    """Discover, order and concatenate *config.camera*'s segments.

    Returns the output path. Raises :class:`MergeError` on the first
    failure; the manifest is removed whether or not ffmpeg succeeds.
    """
    settings = settings or MergeSettings()
    output_path = settings.output_path(config.camera)

    try:
        files = discovery.find_video_files(config.camera, settings)
    except OSError as exc:
        raise MergeError("discovery", f"finding video files: {exc}") from exc

    if not files:
        raise MergeError("empty", f"no video files found for camera: {config.camera}")
    print(f"Found {len(files)} video file(s) for camera: {config.camera}")

    ordered = sequencer.ordered_paths(sequencer.sequence_files(files))

    with manifest.manifest_file(ordered, settings.manifest_path) as manifest_path:
        print(f"Created {manifest_path.name} with {len(ordered)} file(s)")
        cmd = transcode.build_ffmpeg_command(config, manifest_path, output_path)
        print(transcode.describe_encoder(config))
        transcode.run_ffmpeg(cmd)

    print(f"Successfully created: {output_path}")
    return output_path


__all__ = ["merge_timelapse"]
