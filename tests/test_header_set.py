import pytest

from exported_headers.core.header_set import ExportedHeaderSet

def test_iteration_is_sorted_and_unique():
    headers = ExportedHeaderSet(["b.h", "a/z.h", "b.h", "a.h"])
    assert list(headers) == ["a.h", "a/z.h", "b.h"]
    assert len(headers) == 3

def test_membership_and_equality():
    headers = ExportedHeaderSet()
    headers.add("include/foo.h")
    headers.update(["include/foo.h", "include/bar.h"])
    assert "include/foo.h" in headers
    assert "include/baz.h" not in headers
    assert headers == {"include/foo.h", "include/bar.h"}
    assert headers == ExportedHeaderSet(["include/bar.h", "include/foo.h"])

def test_freeze_rejects_further_inserts():
    headers = ExportedHeaderSet(["a.h"])
    assert not headers.frozen
    assert headers.freeze() is headers
    assert headers.frozen
    with pytest.raises(TypeError):
        headers.update(["b.h"])
    assert list(headers) == ["a.h"]
    assert headers == {"a.h"}
