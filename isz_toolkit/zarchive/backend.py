"""Byte-range fetching for blocking and async byte sources."""

from typing import Any, BinaryIO

from .errors import ShortReadError


class BlockingBackend:
    """Fetch exact byte ranges from a seekable binary file object."""

    def __init__(self, source: BinaryIO):
        self.source = source

    def read_at(self, offset: int, size: int) -> bytes:
        self.source.seek(offset)
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self.source.read(remaining)
            if not chunk:
                raise ShortReadError(offset, size, size - remaining)
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)


class AsyncBackend:
    """Fetch exact byte ranges from an object with awaitable seek/read.

    ``aiofiles`` handles and similar async streams fit this shape.
    """

    def __init__(self, source: Any):
        self.source = source

    async def read_at(self, offset: int, size: int) -> bytes:
        await self.source.seek(offset)
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = await self.source.read(remaining)
            if not chunk:
                raise ShortReadError(offset, size, size - remaining)
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)
