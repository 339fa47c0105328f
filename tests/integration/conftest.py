"""Integration tests spawn real processes through POSIX shell stand-ins."""

import stat
import sys

import pytest


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration" in str(item.path):
            item.add_marker(pytest.mark.integration)
            if sys.platform.startswith("win"):
                item.add_marker(pytest.mark.skip(reason="shell stand-ins need POSIX"))


@pytest.fixture
def make_script(tmp_path):
    """Write an executable /bin/sh script and return its path."""
    bin_dir = tmp_path / "fakebin"
    bin_dir.mkdir()

    def _make(name: str, body: str):
        path = bin_dir / name
        path.write_text("#!/bin/sh\n" + body)
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make

