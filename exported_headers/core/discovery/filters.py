# exported_headers/core/discovery/filters.py
from enum import Enum

from exported_headers.core.discovery.entries import CandidateEntry, FileType

# editor swap/backup artifacts and compiled-language sources that projects
# often keep next to their public headers.
SKIPPED_SUFFIXES = (".swp", ".swo", "#", ".cpp", ".cc", ".c")

class EntryAction(Enum):
    # outcome of classifying one traversal entry.
    COLLECT = "collect"
    IGNORE = "ignore"
    PRUNE = "prune"

def should_skip_file(file_name: str) -> bool:
    # hidden names, swap files and source files are never exported headers.
    return (
        not file_name
        or file_name.startswith(".")
        or file_name.endswith(SKIPPED_SUFFIXES)
    )

def classify_entry(entry: CandidateEntry) -> EntryAction:
    """
    Decides what the walker does with one entry.

    Regular files and symlinks to regular files are collected. Skipped
    names are pruned when they are (or link to) directories. Directories
    and directory symlinks are not collected, the walker enters them.
    Sockets, devices and fifos, linked or not, are ignored.
    """
    if should_skip_file(entry.name):
        return EntryAction.PRUNE if entry.is_directory_like else EntryAction.IGNORE

    if entry.file_type is FileType.REGULAR:
        return EntryAction.COLLECT
    if entry.file_type is FileType.SYMLINK and entry.target_type is FileType.REGULAR:
        return EntryAction.COLLECT
    return EntryAction.IGNORE
