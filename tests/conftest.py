import os
import shutil

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def fixture_copy(tmp_path):
    """Copy a named fixture into tmp_path so .indent output stays out of the repo."""
    def _copy(name: str) -> str:
        dest = tmp_path / name
        shutil.copyfile(os.path.join(FIXTURES_DIR, name), dest)
        return str(dest)
    return _copy


def read_bytes(path) -> bytes:
    with open(path, "rb") as f:
        return f.read()
