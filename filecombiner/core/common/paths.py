# File: filecombiner/core/common/paths.py

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def to_absolute(path: PathLike) -> Path:
    """
    Absolute, normalized path ('..' collapsed) without resolving symlinks.
    """
    return Path(os.path.abspath(os.fspath(path)))


def path_key(path: PathLike) -> str:
    """
    Comparison key for de-duplication.
    Paths are compared case-insensitively on every platform so results
    are the same regardless of where the scan runs.
    """
    return os.fspath(to_absolute(path)).casefold()


def relative_display_path(base: PathLike, full: PathLike) -> str:
    """
    Path of `full` relative to `base`.
    Falls back to the absolute path when `full` lies outside `base`.
    """
    base_str = os.fspath(to_absolute(base))
    full_str = os.fspath(to_absolute(full))

    if not base_str.endswith(os.sep):
        base_str += os.sep

    if full_str.casefold().startswith(base_str.casefold()):
        return full_str[len(base_str):]

    return full_str


def file_extension(path: PathLike) -> str:
    """
    Extension including the leading dot, or "" if there is none.
    Unlike Path.suffix, a dotfile is its own extension: '.gitignore' -> '.gitignore'.
    """
    name = os.path.basename(os.fspath(path))
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


def normalize_extension(ext: str) -> str:
    """'txt', '.TXT' -> '.txt'"""
    ext = ext.strip().lower()
    if not ext:
        return ""
    return ext if ext.startswith(".") else f".{ext}"


def normalize_folder(folder: str) -> str:
    """
    '/build/', 'src\\gen' -> 'build', 'src/gen' (using the native separator).
    """
    folder = folder.strip().replace("\\", "/").strip("/")
    return folder.replace("/", os.sep)
