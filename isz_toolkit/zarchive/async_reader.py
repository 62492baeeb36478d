"""Z archive reader for async byte sources."""

import logging
from typing import Any, Iterable, Iterator, Optional

from ..compression import Decompressor, explode
from .backend import AsyncBackend
from .catalog import EntryCatalog
from .errors import DecodeError
from .format import START, DecodeResult, step
from .header import EntryInfo

logger = logging.getLogger(__name__)


class AsyncZArchive:
    """Reader for Z archives on a source with awaitable ``seek``/``read``.

    Build one with ``await AsyncZArchive.open(source)``. If an ``await`` on
    this reader is cancelled, the source position is undefined and the
    reader must be discarded.
    """

    def __init__(self, backend: AsyncBackend, catalog: EntryCatalog, decompressor: Decompressor):
        self._backend = backend
        self._catalog = catalog
        self._decompressor = decompressor

    @classmethod
    async def open(cls, source: Any, decompressor: Optional[Decompressor] = None) -> "AsyncZArchive":
        """Parse the header and TOC of ``source`` and return a ready reader."""
        backend = AsyncBackend(source)

        state, action = step(START)
        while not isinstance(action, DecodeResult):
            data = await backend.read_at(action.offset, action.size)
            state, action = step(state, data)
        logger.debug("Decoded %d entries", len(action.entries))

        return cls(backend, EntryCatalog.from_entries(action.entries), decompressor or explode)

    @property
    def catalog(self) -> EntryCatalog:
        return self._catalog

    @property
    def entries(self) -> Iterable[EntryInfo]:
        return self._catalog.entries()

    def __len__(self) -> int:
        return len(self._catalog)

    def __contains__(self, path: object) -> bool:
        return path in self._catalog

    def list(self) -> Iterator[EntryInfo]:
        """Iterate over all entries (catalog order, not archive order)."""
        return iter(self._catalog.entries())

    def get_entry(self, path: str) -> Optional[EntryInfo]:
        return self._catalog.get(path)

    async def read_raw(self, path: str) -> bytes:
        """Read the still-compressed payload of an entry."""
        entry = self._catalog.find(path)
        logger.debug("Reading %r: %d bytes @ %d", path, entry.compressed_size, entry.data_offset)
        return await self._backend.read_at(entry.data_offset, entry.compressed_size)

    async def read(self, path: str) -> bytes:
        """Read and decompress an entry."""
        raw = await self.read_raw(path)
        try:
            return self._decompressor(raw)
        except Exception as e:
            raise DecodeError(path, str(e)) from e
