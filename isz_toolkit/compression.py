"""PKWare DCL decompression of Z archive payloads."""

from typing import Callable

from refinery.lib.fast.pkware import pkware_decompress

Decompressor = Callable[[bytes], bytes]


def explode(data: bytes) -> bytes:
    """Decompress a PKWare DCL ("implode") stream.

    Raises whatever the underlying decoder raises on corrupt input; archive
    readers turn those into ``DecodeError``.
    """
    return bytes(pkware_decompress(data))
