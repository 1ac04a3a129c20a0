import pytest

from exported_headers.core.discovery import CandidateEntry, EntryAction, FileType, classify_entry, should_skip_file

@pytest.mark.parametrize("name", ["", ".hidden.h", ".git", "backup.h.swp", "backup.h.swo", "lock#", "x.cpp", "x.cc", "x.c"])
def test_skipped_names(name):
    assert should_skip_file(name)

@pytest.mark.parametrize("name", ["public.h", "detail", "foo.hpp", "foo.inc", "c", "readme.cmake"])
def test_kept_names(name):
    assert not should_skip_file(name)

def _entry(name, file_type, target_type=None):
    return CandidateEntry(path=f"/src/include/{name}", name=name, file_type=file_type, target_type=target_type)

def test_hidden_directory_is_pruned():
    assert classify_entry(_entry(".git", FileType.DIRECTORY)) is EntryAction.PRUNE

def test_skipped_file_is_ignored_not_pruned():
    assert classify_entry(_entry("foo.cpp", FileType.REGULAR)) is EntryAction.IGNORE
    assert classify_entry(_entry(".foo.h.swp", FileType.SYMLINK, FileType.REGULAR)) is EntryAction.IGNORE

def test_hidden_directory_symlink_is_pruned():
    assert classify_entry(_entry(".shared", FileType.SYMLINK, FileType.DIRECTORY)) is EntryAction.PRUNE

def test_regular_file_and_file_symlink_are_collected():
    assert classify_entry(_entry("foo.h", FileType.REGULAR)) is EntryAction.COLLECT
    assert classify_entry(_entry("alias.h", FileType.SYMLINK, FileType.REGULAR)) is EntryAction.COLLECT

def test_plain_directory_is_ignored_for_collection():
    # the walker still descends into it.
    assert classify_entry(_entry("detail", FileType.DIRECTORY)) is EntryAction.IGNORE

def test_directory_symlink_is_walked_not_collected():
    entry = _entry("linked", FileType.SYMLINK, FileType.DIRECTORY)
    assert entry.is_directory_like
    assert classify_entry(entry) is EntryAction.IGNORE

def test_special_files_and_links_to_them_are_ignored():
    assert classify_entry(_entry("pipe", FileType.OTHER)) is EntryAction.IGNORE
    assert classify_entry(_entry("pipe.h", FileType.SYMLINK, FileType.OTHER)) is EntryAction.IGNORE
