"""Typer-based command line interface for tlmerge."""

from __future__ import annotations
import typer
from dotenv import load_dotenv

from .core import merge, settings
from .core.errors import MergeError

load_dotenv()

app = typer.Typer(help="Merge and speed up Unifi Protect timelapse segments")


@app.command()
def run(
    camera: str = typer.Option(
        ..., "--camera", "-c", help="Camera name to match video files (required)"
    ),
    ffmpeg: str = typer.Option(
        "ffmpeg",
        "--ffmpeg",
        envvar="FFMPEG_BINARY",
        help="Path to ffmpeg executable (default: \"ffmpeg\" from PATH)",
    ),
    gpu: bool = typer.Option(
        True, "--gpu/--no-gpu", help="Use NVIDIA GPU acceleration (h264_nvenc)"
    ),
    speed: float = typer.Option(
        settings.DEFAULT_SPEED,
        "--speed",
        "-s",
        help="Speedup factor for timelapse (10.0 = 10x speed)",
    ),
) -> None:
    """Merge every ``videos/<camera>*.mp4`` segment into one timelapse.

    Examples:

        tlmerge --camera "G5 Flex"

        tlmerge --camera "G5 Flex" --ffmpeg "C:\\ffmpeg\\bin\\ffmpeg.exe"

        tlmerge --camera "G5 Flex" --no-gpu

        tlmerge --camera "G5 Flex" --speed 5
    """
    try:
        config = settings.RunConfiguration(
            camera=camera, ffmpeg_path=ffmpeg, use_gpu=gpu, speed=speed
        )
        merge.merge_timelapse(config)
    except MergeError as exc:
        typer.echo(f"❌  Error: {exc}", err=True)
        if exc.is_validation:
            typer.echo("Try 'tlmerge --help' for help.", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    """Run the Typer application."""
    app()


if __name__ == "__main__":
    main()
