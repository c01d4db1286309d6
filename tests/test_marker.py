import pytest

from uni.exceptions import UnsupportedManager
from uni.marker import MARKER_FILE, read_marker, write_marker


def test_write_then_read(tmp_path):
    marker = write_marker(tmp_path, "pnpm")
    assert marker == tmp_path / MARKER_FILE
    assert marker.read_text() == "pnpm"
    assert read_marker(tmp_path) == "pnpm"


def test_read_strips_whitespace(tmp_path):
    (tmp_path / MARKER_FILE).write_text("\n  yarn \n")
    assert read_marker(tmp_path) == "yarn"


def test_missing_marker(tmp_path):
    assert read_marker(tmp_path) is None


def test_unreadable_marker(tmp_path):
    (tmp_path / MARKER_FILE).mkdir()
    assert read_marker(tmp_path) is None


def test_undecodable_marker(tmp_path):
    (tmp_path / MARKER_FILE).write_bytes(b"\xff\xfe\xfa")
    assert read_marker(tmp_path) is None


def test_write_unknown_manager(tmp_path):
    with pytest.raises(UnsupportedManager):
        write_marker(tmp_path, "cargo")
    assert not (tmp_path / MARKER_FILE).exists()
