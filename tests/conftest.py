import os

import pytest

from tlmerge.core.settings import MergeSettings

DEC_NAME = "G5 Flex 12-30-2025, 21.00.00 GMT+1 - 12-31-2025, 03.00.00 GMT+1.mp4"
JAN_NAME = "G5 Flex 1-1-2026, 03.00.00 GMT+1 - 1-1-2026, 09.00.00 GMT+1.mp4"


def touch(path, mtime=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def workdir(tmp_path):
    (tmp_path / "videos").mkdir()
    return tmp_path


@pytest.fixture
def merge_settings(workdir):
    return MergeSettings(work_dir=workdir)
