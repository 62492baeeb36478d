"""InstallShield 3 Z archive support."""

from .async_reader import AsyncZArchive
from .catalog import EntryCatalog
from .errors import (
    DecodeError,
    FormatError,
    NotFoundError,
    ShortReadError,
    UnsafePathError,
    ZArchiveError,
)
from .format import FormatDecoder, ReadRequest, DecodeResult, step
from .header import Z_MAGIC, EntryInfo
from .reader import ZArchive

__all__ = [
    "ZArchive",
    "AsyncZArchive",
    "EntryCatalog",
    "EntryInfo",
    "FormatDecoder",
    "ReadRequest",
    "DecodeResult",
    "step",
    "Z_MAGIC",
    "ZArchiveError",
    "FormatError",
    "UnsafePathError",
    "ShortReadError",
    "NotFoundError",
    "DecodeError",
]
