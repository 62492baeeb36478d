"""Tests for PKWare DCL payload decompression."""

import pytest

from isz_toolkit.compression import explode

from zbuilder import implode_literals


class TestExplode:
    def test_coded_literals(self):
        data = (
            b"\x01\x04\x02\x6F\x5A\x08\xB6\x67\xE8\x86\x6A\xA9\x8A\x6D\x28"
            b"\x5E\x56\x6D\xCD\x5B\x5B\x6C\x47\x73\x18\xB6\x8A\x17\xF0\x0F"
        )
        assert explode(data) == b"I like consistent user interfaces."

    def test_backreferences(self):
        assert explode(b"\x00\x04\x82\x24\x25\x8F\x80\x7F") == b"AIAIAIAIAIAIA"

    def test_uncoded_literals(self):
        assert explode(implode_literals(b"Hello, world!")) == b"Hello, world!"

    def test_returns_bytes(self):
        assert type(explode(implode_literals(b"fnord"))) is bytes

    def test_invalid_header(self):
        with pytest.raises(ValueError):
            explode(b"\x09\x04\x00")
