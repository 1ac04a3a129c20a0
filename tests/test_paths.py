# tests/test_paths.py
"""Tests for path canonicalization relative to a root directory."""

import os
import pytest

from exported_headers.core.paths import get_cwd, normalize_path
from exported_headers.exceptions import WorkingDirectoryError


class TestNormalizePath:
    """Tests for normalize_path."""

    def test_path_under_root_becomes_relative(self):
        assert normalize_path("/a/b/sub/file.h", "/a/b") == "sub/file.h"

    def test_path_outside_root_stays_absolute(self):
        assert normalize_path("/a/c/file.h", "/a/b") == "/a/c/file.h"

    def test_dot_segments_are_collapsed_lexically(self):
        assert normalize_path("/a/b/x/../sub/./file.h", "/a/b") == "sub/file.h"
        assert normalize_path("/a/b/../c//file.h", "/a/b") == "/a/c/file.h"

    def test_root_itself_normalizes_to_empty(self):
        assert normalize_path("/a/b", "/a/b") == ""

    def test_relative_path_uses_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        root = os.getcwd()
        assert normalize_path("include/foo.h", root) == os.path.join("include", "foo.h")
        assert normalize_path("./include/../include/foo.h", root) == os.path.join("include", "foo.h")

    def test_accepts_path_objects(self, tmp_path):
        root = str(tmp_path)
        assert normalize_path(tmp_path / "inc" / "a.h", root) == os.path.join("inc", "a.h")

    def test_normalization_is_idempotent(self):
        root = "/project"
        once = normalize_path("/project/include/../include/detail/./bar.h", root)
        assert once == "include/detail/bar.h"
        assert normalize_path(os.path.join(root, once), root) == once

    @pytest.mark.parametrize("bad_path", ["/a/b/bad\0name.h", b"/a/b/file.h", 42])
    def test_unusable_path_returns_empty_string(self, bad_path):
        assert normalize_path(bad_path, "/a/b") == ""

    def test_working_directory_failure_is_fatal(self, monkeypatch):
        def _no_cwd():
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(os, "getcwd", _no_cwd)
        with pytest.raises(WorkingDirectoryError):
            normalize_path("relative/file.h", "/a/b")

    def test_absolute_path_does_not_need_working_directory(self, monkeypatch):
        def _no_cwd():
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(os, "getcwd", _no_cwd)
        assert normalize_path("/a/b/file.h", "/a/b") == "file.h"


def test_get_cwd_returns_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = get_cwd()
    assert os.path.isabs(cwd)
    assert os.path.samefile(cwd, tmp_path)
