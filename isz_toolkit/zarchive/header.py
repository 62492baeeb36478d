"""Z archive header and TOC structures."""

from dataclasses import dataclass
from typing import Tuple

# Magic number at offset 0 (little-endian u32)
Z_MAGIC = 0x8C655D13

# Header plus reserved area; entry payloads start right after it
HEADER_SIZE = 255

# Header field offsets
FILE_COUNT_OFFSET = 12  # u16
TOTAL_SIZE_OFFSET = 18  # u32
TOC_OFFSET_OFFSET = 41  # u32
DIR_COUNT_OFFSET = 49  # u16

# File record layout, relative to the start of the record
FILE_SIZE_SKIP = 7  # reserved bytes before the compressed size
FILE_CHUNK_SKIP = 12  # reserved bytes between size and chunk size
FILE_NAME_SKIP = 4  # reserved bytes between chunk size and name length

PATH_SEPARATOR = "\\"


@dataclass(frozen=True)
class HeaderInfo:
    """Z archive header (first 255 bytes)."""

    file_count: int  # 2 bytes @ 12
    total_size: int  # 4 bytes @ 18: size of the whole archive
    toc_offset: int  # 4 bytes @ 41: start of the TOC, which runs to total_size
    dir_count: int  # 2 bytes @ 49

    @property
    def toc_size(self) -> int:
        return self.total_size - self.toc_offset


@dataclass(frozen=True)
class DirectoryRecord:
    """TOC directory record. An empty name is the archive root."""

    file_count: int
    name: str

    def join(self, name: str) -> str:
        if not self.name:
            return name
        return self.name + PATH_SEPARATOR + name


@dataclass(frozen=True)
class EntryInfo:
    """A file stored in a Z archive."""

    name: str  # leaf name, without directories
    path: str  # full path, directories separated by backslashes
    compressed_size: int
    data_offset: int  # absolute offset of the compressed payload

    @property
    def parts(self) -> Tuple[str, ...]:
        return tuple(self.path.split(PATH_SEPARATOR))

    @property
    def data_end(self) -> int:
        return self.data_offset + self.compressed_size
