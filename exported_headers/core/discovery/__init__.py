# exported_headers/core/discovery/__init__.py
"""
Header discovery for exported-headers.

Walks header directories, prunes hidden trees, drops swap and source files,
and gathers the normalized paths of everything else.
"""
from .entries import CandidateEntry, FileType
from .filters import EntryAction, classify_entry, should_skip_file
from .walker import collect_all_exported_headers, collect_exported_header_set, iter_candidate_entries

__all__ = [
    "CandidateEntry",
    "EntryAction",
    "FileType",
    "classify_entry",
    "collect_all_exported_headers",
    "collect_exported_header_set",
    "iter_candidate_entries",
    "should_skip_file",
]
