"""
Tests for Filename Set ingestion
"""

import os

import pytest

from core import FilenameList, InvalidInputError, build_filename_list, collect_explicit, scan_directory


class TestScanDirectory:

    def test_regular_files_and_symlinks_only(self, workdir):
        directory = workdir({"b.txt": "", "a.txt": ""})
        (directory / "sub").mkdir()
        (directory / "link").symlink_to(directory / "a.txt")
        (directory / "dirlink").symlink_to(directory / "sub")
        assert scan_directory(directory, "#") == ["a.txt", "b.txt", "dirlink", "link"]

    def test_hidden_files_included_by_default(self, workdir):
        directory = workdir({".hidden": "", "shown": ""})
        assert scan_directory(directory, "#") == [".hidden", "shown"]
        assert scan_directory(directory, "#", include_hidden=False) == ["shown"]

    def test_delete_char_rejected(self, workdir):
        directory = workdir({"#notes": "", "a": ""})
        with pytest.raises(InvalidInputError) as excinfo:
            scan_directory(directory, "#")
        assert excinfo.value.name == "#notes"

    def test_other_delete_char(self, workdir):
        directory = workdir({"#notes": ""})
        assert scan_directory(directory, "%") == ["#notes"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(InvalidInputError):
            scan_directory(tmp_path / "nope", "#")

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path, "#") == []


class TestCollectExplicit:

    def test_keeps_argument_order_and_dedupes(self, workdir):
        directory = workdir({"a": "", "b": "", "c": ""})
        assert collect_explicit(["c", "a", "c", "b"], directory, "#") == ["c", "a", "b"]

    def test_missing_file(self, workdir):
        directory = workdir({"a": ""})
        with pytest.raises(InvalidInputError, match="'missing' does not exist"):
            collect_explicit(["a", "missing"], directory, "#")

    def test_dangling_symlink_accepted(self, tmp_path):
        (tmp_path / "dangling").symlink_to(tmp_path / "gone")
        assert collect_explicit(["dangling"], tmp_path, "#") == ["dangling"]

    def test_delete_char_rejected(self, workdir):
        directory = workdir({"#a": ""})
        with pytest.raises(InvalidInputError):
            collect_explicit(["#a"], directory, "#")

    @pytest.mark.parametrize("name", ["sub/a", "./a"])
    def test_names_with_directory_part_rejected(self, workdir, name):
        directory = workdir({"a": ""})
        (directory / "sub").mkdir()
        (directory / "sub" / "a").write_text("")
        with pytest.raises(InvalidInputError, match="--directory"):
            collect_explicit([name], directory, "#")


class TestBuildFilenameList:

    def test_scans_when_no_names(self, workdir, make_options):
        directory = workdir({"b": "", "a": ""})
        result = build_filename_list(None, make_options(directory=directory))
        assert result == FilenameList(["a", "b"])

    def test_explicit_names(self, workdir, make_options):
        directory = workdir({"b": "", "a": ""})
        result = build_filename_list(["b"], make_options(directory=directory))
        assert list(result) == ["b"]

    def test_empty(self, tmp_path, make_options):
        assert len(build_filename_list([], make_options())) == 0
