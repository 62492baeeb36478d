"""Tests for the entry catalog."""

import pytest

from isz_toolkit.zarchive.catalog import EntryCatalog
from isz_toolkit.zarchive.errors import NotFoundError
from isz_toolkit.zarchive.header import EntryInfo


def entry(path: str, size: int = 1, offset: int = 255) -> EntryInfo:
    return EntryInfo(name=path.split("\\")[-1], path=path, compressed_size=size, data_offset=offset)


class TestEntryCatalog:
    def test_lookup(self):
        catalog = EntryCatalog.from_entries([entry("a"), entry("d\\b", offset=256)])
        assert len(catalog) == 2
        assert "d\\b" in catalog
        assert catalog["d\\b"].data_offset == 256
        assert catalog.find("a").name == "a"

    def test_find_missing(self):
        catalog = EntryCatalog.from_entries([entry("a")])
        with pytest.raises(NotFoundError) as excinfo:
            catalog.find("b")
        assert excinfo.value.path == "b"
        assert isinstance(excinfo.value, LookupError)

    def test_get_missing(self):
        assert EntryCatalog.from_entries([]).get("x") is None

    def test_duplicate_path_keeps_later(self):
        first = entry("same", size=1, offset=255)
        second = entry("same", size=2, offset=256)
        catalog = EntryCatalog.from_entries([first, second])
        assert len(catalog) == 1
        assert catalog["same"] is second

    def test_entries_restartable(self):
        catalog = EntryCatalog.from_entries([entry("a"), entry("b")])
        view = catalog.entries()
        assert sorted(e.path for e in view) == ["a", "b"]
        assert sorted(e.path for e in view) == ["a", "b"]

    def test_empty(self):
        catalog = EntryCatalog.from_entries([])
        assert len(catalog) == 0
        assert list(catalog.entries()) == []

    def test_entry_parts(self):
        assert entry("a\\b\\c.txt").parts == ("a", "b", "c.txt")
        assert entry("c.txt", size=4, offset=300).data_end == 304
