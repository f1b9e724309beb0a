"""Unit tests for resilient directory listing."""

import os

import pytest

from treecreator.listing import list_directory


def test_list_directory_splits_directories_and_files(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "file.txt").touch()

    directories, files = list_directory(str(tmp_path))

    assert [entry.name for entry in directories] == ["sub"]
    assert [entry.name for entry in files] == ["file.txt"]


def test_missing_directory_lists_as_empty(tmp_path):
    assert list_directory(str(tmp_path / "missing")) == ([], [])


def test_file_lists_as_empty(tmp_path):
    path = tmp_path / "file.txt"
    path.touch()
    assert list_directory(str(path)) == ([], [])


def test_permission_error_lists_as_empty(tmp_path, monkeypatch):
    def denied(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(os, "scandir", denied)
    assert list_directory(str(tmp_path)) == ([], [])


def test_symlink_to_directory_counts_as_directory(tmp_path):
    (tmp_path / "target").mkdir()
    try:
        os.symlink(tmp_path / "target", tmp_path / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    directories, _ = list_directory(str(tmp_path))
    assert sorted(entry.name for entry in directories) == ["link", "target"]
