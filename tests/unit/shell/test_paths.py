"""Tests for copy/move path helpers."""

import os
import shutil
from pathlib import Path

import pytest

from storyshell.shell.paths import (
    copy_path,
    expand_sources,
    move_path,
    normalize_path,
    resolve_target,
)


def test_normalize_path_collapses_segments() -> None:
    assert normalize_path("a/./b") == "a/b"
    assert normalize_path("a//b/../c/") == "a/c"
    assert normalize_path(Path("x/./y")) == "x/y"


def test_expand_sources_passes_plain_paths_through(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.txt")

    assert expand_sources(missing) == [missing]


def test_expand_sources_expands_globs_sorted(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "c.log").write_text("c")

    result = expand_sources(str(tmp_path / "*.txt"))

    assert result == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]


def test_expand_sources_keeps_literal_path_when_glob_matches_nothing(tmp_path: Path) -> None:
    literal = str(tmp_path / "report[1].txt")

    assert expand_sources(literal) == [literal]


def test_resolve_target_into_existing_directory(tmp_path: Path) -> None:
    dst = tmp_path / "out"
    dst.mkdir()

    assert resolve_target("src/file.txt", str(dst)) == os.path.join(str(dst), "file.txt")


def test_resolve_target_keeps_non_directory_destination(tmp_path: Path) -> None:
    dst = str(tmp_path / "renamed.txt")

    assert resolve_target("src/file.txt", dst) == dst


def test_copy_path_merges_directories(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "nested" / "new.txt").write_text("new")
    dst = tmp_path / "dst"
    (dst / "nested").mkdir(parents=True)
    (dst / "nested" / "old.txt").write_text("old")

    copy_path(str(src), str(dst))

    assert (dst / "nested" / "new.txt").read_text() == "new"
    assert (dst / "nested" / "old.txt").read_text() == "old"


def test_copy_path_overwrites_file(tmp_path: Path) -> None:
    src = tmp_path / "a.txt"
    src.write_text("fresh")
    dst = tmp_path / "b.txt"
    dst.write_text("stale")

    copy_path(str(src), str(dst))

    assert dst.read_text() == "fresh"


def test_move_path_replaces_existing_file(tmp_path: Path) -> None:
    src = tmp_path / "a.txt"
    src.write_text("fresh")
    dst = tmp_path / "b.txt"
    dst.write_text("stale")

    move_path(str(src), str(dst))

    assert not src.exists()
    assert dst.read_text() == "fresh"


def test_move_path_replaces_empty_directory(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "f.txt").write_text("x")
    dst = tmp_path / "dst"
    dst.mkdir()

    move_path(str(src), str(dst))

    assert (dst / "f.txt").read_text() == "x"
    assert not src.exists()


def test_move_path_refuses_non_empty_directory(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "keep.txt").write_text("keep")

    with pytest.raises(OSError):
        move_path(str(src), str(dst))

    assert (dst / "keep.txt").exists()


def test_move_path_refuses_to_replace_directory_with_file(tmp_path: Path) -> None:
    src = tmp_path / "file.txt"
    src.write_text("x")
    dst = tmp_path / "dir"
    dst.mkdir()

    with pytest.raises(IsADirectoryError):
        move_path(str(src), str(dst))


def test_move_path_same_file(tmp_path: Path) -> None:
    src = tmp_path / "file.txt"
    src.write_text("x")

    with pytest.raises(shutil.SameFileError):
        move_path(str(src), str(src))
