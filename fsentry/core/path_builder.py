"""Path calculation only"""
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

INFO_FILE_NAME = ".info.json"
ENTRY_SUFFIX = ".json"
BINARY_SUFFIX = ".bin"


def build_path(root: PathLike, *segments: str) -> Path:
    """
    Join the store root with nested segments

    Existence is never checked here.
    """
    return Path(root).joinpath(*segments)


def folder_path(parent: PathLike, identifier: str) -> Path:
    return build_path(parent, identifier)


def info_path(parent: PathLike, identifier: str) -> Path:
    return build_path(parent, identifier, INFO_FILE_NAME)


def entry_path(parent: PathLike, identifier: str) -> Path:
    return build_path(parent, identifier + ENTRY_SUFFIX)


def binary_path(parent: PathLike, identifier: str) -> Path:
    return build_path(parent, identifier + BINARY_SUFFIX)
