from pathlib import Path

import pytest

from tlmerge.core.errors import MergeError
from tlmerge.core.settings import MergeSettings, RunConfiguration, sanitize_filename


@pytest.mark.parametrize("speed", [0.1, 0.5, 1.0, 10.0, 333.3, 1000.0])
def test_rescale_factor_is_inverse_speed(speed):
    assert RunConfiguration("cam", speed=speed).rescale_factor == pytest.approx(1 / speed)


@pytest.mark.parametrize("speed", [0.05, 0.0999, 1000.01, -1.0, float("nan"), float("inf")])
def test_speed_out_of_range(speed):
    with pytest.raises(MergeError) as info:
        RunConfiguration("cam", speed=speed)
    assert info.value.kind == "config"
    assert info.value.is_validation
    assert "between 0.1 and 1000.0" in str(info.value)


@pytest.mark.parametrize("camera", ["", "   "])
def test_camera_required(camera):
    with pytest.raises(MergeError) as info:
        RunConfiguration(camera)
    assert info.value.is_validation


def test_defaults():
    config = RunConfiguration("G5 Flex")
    assert config.ffmpeg_path == "ffmpeg"
    assert config.use_gpu is True
    assert config.speed == 10.0


def test_configuration_is_frozen():
    config = RunConfiguration("cam")
    with pytest.raises(AttributeError):
        config.speed = 2.0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("G5 Flex", "G5_Flex"),
        ('a/b\\c:d*e?f"g<h>i|j', "a_b_c_d_e_f_g_h_i_j"),
        ("\tcam\n", "cam"),
        ("plain", "plain"),
    ],
)
def test_sanitize_filename(name, expected):
    assert sanitize_filename(name) == expected


@pytest.mark.parametrize("name", ["G5 Flex", " lead", "x:y", "\tcam\n", "ok_name"])
def test_sanitize_is_idempotent(name):
    once = sanitize_filename(name)
    assert sanitize_filename(once) == once


def test_output_and_manifest_paths(tmp_path):
    settings = MergeSettings(work_dir=tmp_path)
    assert settings.output_path("G5 Flex") == tmp_path / "G5_Flex_merged_timelapse.mp4"
    assert settings.manifest_path == tmp_path / "inputs.txt"
    assert settings.videos_dir == tmp_path / "videos"


def test_default_paths_are_relative():
    settings = MergeSettings()
    assert str(settings.manifest_path) == "inputs.txt"
    assert settings.output_path("G5 Flex") == Path("G5_Flex_merged_timelapse.mp4")
