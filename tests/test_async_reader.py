"""Tests for the async Z archive reader."""

import asyncio

import pytest

from isz_toolkit.compression import explode
from isz_toolkit.zarchive import AsyncZArchive, DecodeError, FormatError, NotFoundError, ShortReadError

from zbuilder import AsyncBytesIO, build_archive, demo_archive


def run(coro):
    return asyncio.run(coro)


class TestAsyncZArchive:
    def test_list(self):
        archive = run(AsyncZArchive.open(AsyncBytesIO(demo_archive())))
        assert {e.path for e in archive.list()} == {"hello.txt", "subdir\\test.txt"}
        assert "hello.txt" in archive
        assert len(archive) == 2

    def test_read(self):
        async def main():
            archive = await AsyncZArchive.open(AsyncBytesIO(demo_archive()))
            return await archive.read("hello.txt"), await archive.read("subdir\\test.txt")

        assert run(main()) == (b"Hello, world!", b"fnord")

    def test_read_raw_then_explode(self):
        async def main():
            archive = await AsyncZArchive.open(AsyncBytesIO(demo_archive()))
            for entry in archive.list():
                raw = await archive.read_raw(entry.path)
                assert len(raw) == entry.compressed_size
                assert explode(raw) == await archive.read(entry.path)

        run(main())

    def test_partial_reads_are_completed(self):
        source = AsyncBytesIO(demo_archive(), chunk=4)

        async def main():
            archive = await AsyncZArchive.open(source)
            return await archive.read("hello.txt")

        assert run(main()) == b"Hello, world!"
        assert source.reads > 3

    def test_missing_path(self):
        async def main():
            archive = await AsyncZArchive.open(AsyncBytesIO(demo_archive()))
            with pytest.raises(NotFoundError):
                await archive.read("nope.txt")
            return await archive.read("hello.txt")

        assert run(main()) == b"Hello, world!"

    def test_get_entry(self):
        archive = run(AsyncZArchive.open(AsyncBytesIO(demo_archive())))
        assert archive.get_entry("hello.txt").data_offset == 255
        assert archive.get_entry("other") is None


class TestAsyncZArchiveErrors:
    def test_bad_magic(self):
        data = b"\x00" * 4 + demo_archive()[4:]
        with pytest.raises(FormatError):
            run(AsyncZArchive.open(AsyncBytesIO(data)))

    def test_empty_archive(self):
        archive = run(AsyncZArchive.open(AsyncBytesIO(build_archive([]))))
        assert list(archive.list()) == []

    def test_short_source(self):
        with pytest.raises(ShortReadError):
            run(AsyncZArchive.open(AsyncBytesIO(demo_archive()[:200])))

    def test_corrupt_payload(self):
        async def main():
            data = build_archive([("", [("bad", b"\x05\x05xx")])])
            archive = await AsyncZArchive.open(AsyncBytesIO(data))
            await archive.read("bad")

        with pytest.raises(DecodeError):
            run(main())

    def test_custom_decompressor(self):
        async def main():
            data = build_archive([("docs", [("upper.txt", b"shout")])])
            archive = await AsyncZArchive.open(AsyncBytesIO(data), decompressor=bytes.upper)
            return await archive.read("docs\\upper.txt")

        assert run(main()) == b"SHOUT"
