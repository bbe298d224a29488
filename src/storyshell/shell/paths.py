"""Path helpers for copy and move operations."""

import glob
import os
import shutil

from storyshell.shell.types import StrPath


def normalize_path(path: StrPath) -> str:
    """Collapse redundant separators and ``.``/``..`` segments.

    >>> normalize_path("a/./b//c/../d")
    'a/b/d'
    """
    return os.path.normpath(os.fspath(path))


def expand_sources(src: str) -> list[str]:
    """Expand a glob pattern into the matching paths, sorted.

    Paths without glob characters, and patterns that match nothing, are
    returned as-is so a literal name such as ``report[1].txt`` still works
    and the filesystem call reports a missing path itself.
    """
    if not glob.has_magic(src):
        return [src]
    matches = sorted(glob.glob(src))
    if not matches:
        return [src]
    return matches


def resolve_target(source: str, dst: str) -> str:
    """Return where source ends up: inside dst if dst is a directory, else dst."""
    if os.path.isdir(dst):
        return os.path.join(dst, os.path.basename(source))
    return dst


def copy_path(source: str, target: str) -> None:
    """Copy a file or directory tree, merging into existing directories."""
    if os.path.isdir(source) and not os.path.islink(source):
        shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
        return
    shutil.copy2(source, target, follow_symlinks=False)


def move_path(source: str, target: str) -> None:
    """Move a file or directory, replacing whatever sits at target.

    An existing target directory is only replaced when it is empty, and a
    directory is never replaced by a file.

    Raises:
        shutil.SameFileError: If source and target are the same file
        IsADirectoryError: If target is a directory and source is not
        OSError: If target is a non-empty directory
    """
    if os.path.lexists(target):
        if os.path.exists(target) and os.path.samefile(source, target):
            raise shutil.SameFileError(f"{source} and {target} are the same file")
        if os.path.isdir(target) and not os.path.islink(target):
            if not os.path.isdir(source):
                raise IsADirectoryError(f"Cannot overwrite directory {target} with {source}")
            os.rmdir(target)
        else:
            os.remove(target)
    shutil.move(source, target)
