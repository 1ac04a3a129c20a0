# exported_headers/core/paths.py
"""
Path canonicalization shared by the header collector and its consumers.

Working-directory failures are environmental and raise WorkingDirectoryError.
A single path that cannot be made absolute is a local failure and yields "".
"""
import os
from typing import Union
import structlog

from exported_headers.exceptions import WorkingDirectoryError

log = structlog.get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

def get_cwd() -> str:
    # returns the absolute current working directory.
    try:
        return os.getcwd()
    except OSError as e:
        raise WorkingDirectoryError(f"failed to get current working directory: {e}") from e

def _make_absolute(path: PathLike) -> str:
    # raises TypeError/ValueError for values that are not usable paths.
    path_str = os.fspath(path)
    if not isinstance(path_str, str):
        raise TypeError(f"expected a text path, got {type(path_str).__name__}")
    if "\0" in path_str:
        raise ValueError("embedded null character in path")
    if os.path.isabs(path_str):
        return path_str
    return os.path.join(get_cwd(), path_str)

def normalize_path(path: PathLike, root_dir: str) -> str:
    """
    Canonicalizes `path` and makes it relative to `root_dir` when it lies
    beneath it.

    `root_dir` must already be absolute. Paths outside the root are returned
    as canonical absolute paths. Returns "" if `path` cannot be made absolute.
    """
    try:
        abs_path = _make_absolute(path)
    except (TypeError, ValueError) as e:
        log.debug("path_normalization_failed", path=repr(path), error=str(e))
        return ""

    # lexical only: ".." is not resolved through symlinks.
    norm_path = os.path.normpath(abs_path)

    if root_dir and norm_path.startswith(root_dir):
        return norm_path[len(root_dir):].lstrip(os.sep)
    return norm_path
