# exported_headers/core/discovery/entries.py
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FileType(Enum):
    REGULAR = "regular"
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"

    @classmethod
    def from_mode(cls, st_mode: int) -> "FileType":
        # classifies an lstat() mode without following symlinks.
        if stat.S_ISLNK(st_mode):
            return cls.SYMLINK
        if stat.S_ISREG(st_mode):
            return cls.REGULAR
        if stat.S_ISDIR(st_mode):
            return cls.DIRECTORY
        return cls.OTHER

@dataclass(frozen=True)
class CandidateEntry:
    # one traversal step: absolute path, file type and base name.
    path: str
    name: str
    file_type: FileType
    # type of the link target, set only for symlinks.
    target_type: Optional[FileType] = None

    @property
    def is_directory_like(self) -> bool:
        # directories and symlinks to directories are both walked into.
        return self.file_type is FileType.DIRECTORY or (
            self.file_type is FileType.SYMLINK and self.target_type is FileType.DIRECTORY
        )
