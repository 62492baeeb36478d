"""Z archive reader and extractor."""

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, Tuple, Union

from ..compression import Decompressor, explode
from .backend import BlockingBackend
from .catalog import EntryCatalog
from .errors import DecodeError, UnsafePathError
from .format import START, DecodeResult, step
from .header import EntryInfo

logger = logging.getLogger(__name__)


class ZArchive:
    """Reader for InstallShield 3 Z archives on a blocking byte source.

    The header and TOC are parsed on construction; a reader is never
    returned half-initialized.
    """

    def __init__(self, source: BinaryIO, decompressor: Optional[Decompressor] = None):
        self._backend = BlockingBackend(source)
        self._decompressor = decompressor or explode
        self._owns_source = False
        self._catalog = EntryCatalog.from_entries(self._decode())

    @classmethod
    def open(
        cls, path: Union[str, Path], decompressor: Optional[Decompressor] = None
    ) -> "ZArchive":
        """Open an archive file by path; the reader closes it on :meth:`close`."""
        file = open(path, "rb")
        try:
            archive = cls(file, decompressor)
        except Exception:
            file.close()
            raise
        archive._owns_source = True
        return archive

    def __enter__(self) -> "ZArchive":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the source if this reader opened it."""
        if self._owns_source:
            self._backend.source.close()
            self._owns_source = False

    def _decode(self):
        state, action = step(START)
        while not isinstance(action, DecodeResult):
            data = self._backend.read_at(action.offset, action.size)
            state, action = step(state, data)
        logger.debug("Decoded %d entries", len(action.entries))
        return action.entries

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
        """Find an entry by path, or None."""
        return self._catalog.get(path)

    def read_raw(self, path: str) -> bytes:
        """Read the still-compressed payload of an entry."""
        entry = self._catalog.find(path)
        logger.debug("Reading %r: %d bytes @ %d", path, entry.compressed_size, entry.data_offset)
        return self._backend.read_at(entry.data_offset, entry.compressed_size)

    def read(self, path: str) -> bytes:
        """Read and decompress an entry."""
        raw = self.read_raw(path)
        try:
            return self._decompressor(raw)
        except Exception as e:
            raise DecodeError(path, str(e)) from e

    def extract_all(self, output_dir: Path, raw: bool = False) -> Iterator[Tuple[EntryInfo, Path]]:
        """Extract all files to the output directory.

        Backslash-separated path segments become directories. Yields
        (entry, output_path) after each file is written.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        for entry in self._catalog.entries():
            output_path = output_dir.joinpath(*safe_parts(entry))
            output_path.parent.mkdir(parents=True, exist_ok=True)

            data = self.read_raw(entry.path) if raw else self.read(entry.path)
            output_path.write_bytes(data)

            yield entry, output_path


def safe_parts(entry: EntryInfo) -> Tuple[str, ...]:
    """Path segments of an entry, refusing anything that escapes the target."""
    parts = entry.parts
    for part in parts:
        if part in ("", ".", "..") or "/" in part or ":" in part:
            raise UnsafePathError(f"Refusing to extract unsafe path {entry.path!r}")
    return parts
