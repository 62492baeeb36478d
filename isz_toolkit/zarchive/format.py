"""I/O-free Z archive format decoder.

The decoder never touches a byte source. Each call to :func:`step` takes the
current state plus the bytes the previous step asked for and returns the next
state together with an action: either a :class:`ReadRequest` naming the byte
range to fetch next, or the final :class:`DecodeResult`. Blocking and async
readers drive the same decoder and differ only in how they fetch bytes::

    state, action = step(START)
    while isinstance(action, ReadRequest):
        data = fetch(action.offset, action.size)
        state, action = step(state, data)
    entries = action.entries
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..utils.binary import BinaryReader, read_u16_le, read_u32_le
from .errors import FormatError, ShortReadError
from .header import (
    DIR_COUNT_OFFSET,
    FILE_CHUNK_SKIP,
    FILE_COUNT_OFFSET,
    FILE_NAME_SKIP,
    FILE_SIZE_SKIP,
    HEADER_SIZE,
    TOC_OFFSET_OFFSET,
    TOTAL_SIZE_OFFSET,
    Z_MAGIC,
    DirectoryRecord,
    EntryInfo,
    HeaderInfo,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadRequest:
    """Ask the caller for ``size`` bytes starting at absolute ``offset``."""

    offset: int
    size: int


@dataclass(frozen=True)
class DecodeResult:
    """All entries of the archive, in TOC order."""

    entries: List[EntryInfo]


Action = Union[ReadRequest, DecodeResult]


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class ParsingHeader:
    pass


@dataclass(frozen=True)
class ParsingToc:
    header: HeaderInfo


@dataclass(frozen=True)
class Done:
    pass


State = Union[Start, ParsingHeader, ParsingToc, Done]

START = Start()


def step(state: State, data: Optional[bytes] = None) -> Tuple[State, Action]:
    """Advance the decoder by one step.

    ``data`` must be exactly the bytes requested by the previous step; it is
    ignored in the ``Start`` state.
    """
    if isinstance(state, Start):
        return ParsingHeader(), ReadRequest(0, HEADER_SIZE)

    if isinstance(state, ParsingHeader):
        _check_length(data, ReadRequest(0, HEADER_SIZE))
        header = parse_header(data)
        return ParsingToc(header), ReadRequest(header.toc_offset, header.toc_size)

    if isinstance(state, ParsingToc):
        header = state.header
        _check_length(data, ReadRequest(header.toc_offset, header.toc_size))
        return Done(), DecodeResult(parse_toc(header, data))

    raise RuntimeError(f"Decoder cannot advance from state {state!r}")


def parse_header(data: bytes) -> HeaderInfo:
    """Parse the fixed 255-byte header block."""
    magic = read_u32_le(data, 0)
    if magic != Z_MAGIC:
        raise FormatError(f"Invalid Z archive magic: 0x{magic:08x}, expected 0x{Z_MAGIC:08x}")

    header = HeaderInfo(
        file_count=read_u16_le(data, FILE_COUNT_OFFSET),
        total_size=read_u32_le(data, TOTAL_SIZE_OFFSET),
        toc_offset=read_u32_le(data, TOC_OFFSET_OFFSET),
        dir_count=read_u16_le(data, DIR_COUNT_OFFSET),
    )
    if header.toc_offset > header.total_size:
        raise FormatError(
            f"TOC offset ({header.toc_offset}) exceeds archive size ({header.total_size})"
        )

    logger.debug("Parsed header: %s", header)
    return header


def parse_toc(header: HeaderInfo, data: bytes) -> List[EntryInfo]:
    """Walk the TOC buffer (offset 0 is ``header.toc_offset``).

    Directory records come first, then the file records of every directory
    in the same order. Records are located by their stored chunk size, never
    by the size of the fields actually read.
    """
    reader = BinaryReader(data)
    try:
        directories, cursor = _read_directories(reader, header.dir_count)
        entries = _read_files(reader, directories, cursor)
    except EOFError as e:
        raise FormatError(f"Truncated TOC record: {e}") from e
    except UnicodeDecodeError as e:
        raise FormatError(f"Invalid name encoding in TOC: {e}") from e

    if len(entries) != header.file_count:
        logger.debug(
            "Header announces %d files, TOC holds %d", header.file_count, len(entries)
        )
    return entries


def _read_directories(reader: BinaryReader, count: int) -> Tuple[List[DirectoryRecord], int]:
    directories = []
    cursor = 0
    for _ in range(count):
        reader.seek(cursor)
        file_count = reader.read_u16()
        chunk_size = reader.read_u16()
        name_length = reader.read_u16()
        name = reader.read_string(name_length)

        directories.append(DirectoryRecord(file_count=file_count, name=name))
        logger.debug("Directory %r: %d files", name, file_count)
        cursor += chunk_size

    return directories, cursor


def _read_files(
    reader: BinaryReader, directories: List[DirectoryRecord], cursor: int
) -> List[EntryInfo]:
    entries = []
    data_offset = HEADER_SIZE
    for directory in directories:
        for _ in range(directory.file_count):
            reader.seek(cursor + FILE_SIZE_SKIP)
            compressed_size = reader.read_u32()
            reader.skip(FILE_CHUNK_SKIP)
            chunk_size = reader.read_u16()
            reader.skip(FILE_NAME_SKIP)
            name_length = reader.read_u8()
            name = reader.read_string(name_length)

            entry = EntryInfo(
                name=name,
                path=directory.join(name),
                compressed_size=compressed_size,
                data_offset=data_offset,
            )
            entries.append(entry)
            logger.debug(
                "Entry %r: %d bytes @ %d", entry.path, compressed_size, data_offset
            )

            cursor += chunk_size
            data_offset += compressed_size

    return entries


def _check_length(data: Optional[bytes], request: ReadRequest) -> None:
    got = 0 if data is None else len(data)
    if got != request.size:
        raise ShortReadError(request.offset, request.size, got)


class FormatDecoder:
    """Stateful convenience wrapper around :func:`step`."""

    def __init__(self):
        self._state: State = START

    @property
    def state(self) -> State:
        return self._state

    @property
    def done(self) -> bool:
        return isinstance(self._state, Done)

    def advance(self, data: Optional[bytes] = None) -> Action:
        """Feed the bytes of the previous request and get the next action."""
        self._state, action = step(self._state, data)
        return action
