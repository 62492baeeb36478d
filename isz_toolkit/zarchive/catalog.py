"""Path-keyed catalog of archive entries."""

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, ValuesView

from .errors import NotFoundError
from .header import EntryInfo

logger = logging.getLogger(__name__)


class EntryCatalog(Mapping):
    """Read-only mapping from entry path to :class:`EntryInfo`.

    When two entries share a path, the one found later in the TOC wins.
    Archives produced in the wild occasionally contain such duplicates, so
    this is not treated as an error.
    """

    def __init__(self, entries: Dict[str, EntryInfo]):
        self._entries = entries

    @classmethod
    def from_entries(cls, entries: Iterable[EntryInfo]) -> "EntryCatalog":
        by_path: Dict[str, EntryInfo] = {}
        for entry in entries:
            if entry.path in by_path:
                logger.debug("Duplicate path %r, keeping the later entry", entry.path)
            by_path[entry.path] = entry
        return cls(by_path)

    def __getitem__(self, path: str) -> EntryInfo:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EntryCatalog({len(self._entries)} entries)"

    def entries(self) -> ValuesView[EntryInfo]:
        """Lazy, restartable view of all entries."""
        return self._entries.values()

    def find(self, path: str) -> EntryInfo:
        """Look up an entry, raising :class:`NotFoundError` if absent."""
        entry: Optional[EntryInfo] = self._entries.get(path)
        if entry is None:
            raise NotFoundError(path)
        return entry
