# exported_headers/core/discovery/walker.py
import os
from typing import FrozenSet, Iterator, List, Sequence, Tuple
import structlog

from exported_headers.core.discovery.entries import CandidateEntry, FileType
from exported_headers.core.discovery.filters import EntryAction, classify_entry, should_skip_file
from exported_headers.core.header_set import ExportedHeaderSet
from exported_headers.core.paths import PathLike, normalize_path
from exported_headers.exceptions import CollectionError

log = structlog.get_logger(__name__)

def _scan_directory(dir_path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(dir_path) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise CollectionError(f"failed to walk directory: {dir_path}: {e.strerror or e}", path=dir_path) from e

def _stat_entry(dir_entry: os.DirEntry) -> CandidateEntry:
    try:
        file_type = FileType.from_mode(dir_entry.stat(follow_symlinks=False).st_mode)
        target_type = None
        if file_type is FileType.SYMLINK:
            # a dangling link fails here and aborts the walk like any other stat failure.
            target_type = FileType.from_mode(dir_entry.stat(follow_symlinks=True).st_mode)
    except OSError as e:
        raise CollectionError(f"failed to stat file: {dir_entry.path}: {e.strerror or e}", path=dir_entry.path) from e

    return CandidateEntry(path=dir_entry.path, name=dir_entry.name, file_type=file_type, target_type=target_type)

def _directory_key(dir_path: str) -> Tuple[int, int]:
    try:
        st = os.stat(dir_path)
    except OSError as e:
        raise CollectionError(f"failed to stat directory: {dir_path}: {e.strerror or e}", path=dir_path) from e
    return st.st_dev, st.st_ino

def iter_candidate_entries(directory: PathLike) -> Iterator[Tuple[CandidateEntry, EntryAction]]:
    """
    Walks `directory` depth-first and yields every visited entry whose name
    passes the skip predicate, together with its classification.

    Skipped directories are pruned. Symlinked directories are entered like
    plain ones; a directory that is already one of its own ancestors is not
    entered again, so link loops end while aliased trees are still walked.
    Raises CollectionError if a directory cannot be listed or an entry
    cannot be stat'ed.
    """
    start = os.fspath(directory)
    pending: List[Tuple[str, FrozenSet[Tuple[int, int]]]] = [(start, frozenset([_directory_key(start)]))]
    while pending:
        current_dir, ancestors = pending.pop()
        subdirs: List[Tuple[str, FrozenSet[Tuple[int, int]]]] = []
        for dir_entry in _scan_directory(current_dir):
            if should_skip_file(dir_entry.name):
                # never stat'ed, and never descended into when it is a directory.
                log.debug("entry_skipped", path=dir_entry.path)
                continue

            entry = _stat_entry(dir_entry)
            action = classify_entry(entry)
            if entry.is_directory_like and action is not EntryAction.PRUNE:
                key = _directory_key(entry.path)
                if key in ancestors:
                    log.debug("directory_loop_skipped", path=entry.path)
                else:
                    subdirs.append((entry.path, ancestors | {key}))
            yield entry, action
        # reversed so that siblings are visited in name order.
        pending.extend(reversed(subdirs))

def collect_exported_header_set(dir_name: PathLike, exported_headers: ExportedHeaderSet, root_dir: str) -> None:
    # adds every exported header beneath dir_name to the shared set.
    dir_str = os.fspath(dir_name)
    if not os.path.isdir(dir_str):
        raise CollectionError(f"not a directory: {dir_str}", path=dir_str)

    log.info("header_collection_started", directory=dir_str, root_dir=root_dir)
    collected = 0
    for entry, action in iter_candidate_entries(dir_str):
        if action is not EntryAction.COLLECT:
            continue
        normalized = normalize_path(entry.path, root_dir)
        if not normalized:
            log.debug("header_path_not_normalizable", path=entry.path)
            continue
        exported_headers.add(normalized)
        collected += 1
    log.info("header_collection_finished", directory=dir_str, collected=collected)

def collect_all_exported_headers(exported_header_dirs: Sequence[PathLike], root_dir: str) -> ExportedHeaderSet:
    """
    Collects exported headers from every directory into one set.

    The first failing directory aborts the whole collection: partial
    inventories are never returned.
    """
    exported_headers = ExportedHeaderSet()
    for header_dir in exported_header_dirs:
        try:
            collect_exported_header_set(header_dir, exported_headers, root_dir)
        except CollectionError as e:
            log.error("header_collection_failed", directory=os.fspath(header_dir), error=str(e))
            raise CollectionError(f"couldn't collect exported headers: {e}", path=e.path) from e
    log.info("exported_headers_collected", directories=len(exported_header_dirs), count=len(exported_headers))
    return exported_headers.freeze()
