"""Errors raised while reading Z archives."""


class ZArchiveError(Exception):
    """Base class for all Z archive errors."""


class FormatError(ZArchiveError, ValueError):
    """The archive header or table of contents is malformed."""


class UnsafePathError(FormatError):
    """An entry path would escape the extraction directory."""


class ShortReadError(ZArchiveError, OSError):
    """The byte source returned fewer bytes than requested."""

    def __init__(self, offset: int, expected: int, got: int):
        super().__init__(f"Short read at offset {offset}: expected {expected} bytes, got {got}")
        self.offset = offset
        self.expected = expected
        self.got = got


class NotFoundError(ZArchiveError, LookupError):
    """No entry with the requested path exists in the archive."""

    def __init__(self, path: str):
        super().__init__(f"File not found in archive: {path!r}")
        self.path = path


class DecodeError(ZArchiveError):
    """The compressed payload of an entry could not be decompressed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot decompress {path!r}: {reason}")
        self.path = path
