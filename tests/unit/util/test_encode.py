"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details
"""

import pytest

from thorsig import InvalidArgumentError
from thorsig.util.encode import decodeBytes, intFromBytes, intToBytes, toBytesPadded


class TestEncode:
    def test_intToBytes(self):
        assert intToBytes(0) == b""
        assert intToBytes(1) == b"\x01"
        assert intToBytes(255) == b"\xff"
        assert intToBytes(256) == b"\x01\x00"
        assert intToBytes(-1, signed=True) == b"\xff"
        assert intToBytes(128, signed=True) == b"\x00\x80"

    def test_intFromBytes(self):
        assert intFromBytes(b"") == 0
        assert intFromBytes(b"\x01\x00") == 256
        assert intFromBytes(bytes(31) + b"\x07") == 7
        assert intFromBytes(b"\xff", signed=True) == -1
        for i in (0, 1, 255, 256, 2 ** 255 + 3):
            assert intFromBytes(intToBytes(i)) == i

    def test_toBytesPadded(self):
        assert toBytesPadded(0, 32) == bytes(32)
        assert toBytesPadded(1, 32) == bytes(31) + b"\x01"
        assert toBytesPadded(0x0102, 4) == b"\x00\x00\x01\x02"
        assert toBytesPadded(2 ** 256 - 1, 32) == b"\xff" * 32
        # The length is fixed regardless of magnitude.
        for i in (1, 2 ** 64, 2 ** 200, 2 ** 255):
            assert len(toBytesPadded(i, 32)) == 32
        with pytest.raises(InvalidArgumentError):
            toBytesPadded(2 ** 256, 32)
        with pytest.raises(InvalidArgumentError):
            toBytesPadded(-1, 32)

    def test_decodeBytes(self):
        assert decodeBytes(b"\x01\x02") == b"\x01\x02"
        assert decodeBytes(bytearray([1, 2])) == b"\x01\x02"
        assert decodeBytes([1, 2]) == b"\x01\x02"
        assert decodeBytes("0102") == b"\x01\x02"
        assert decodeBytes("0x0102") == b"\x01\x02"
        assert decodeBytes("0XABcd") == b"\xab\xcd"
        assert decodeBytes("") == b""
        with pytest.raises(InvalidArgumentError):
            decodeBytes("zz")
        with pytest.raises(InvalidArgumentError):
            decodeBytes("010")
        with pytest.raises(TypeError):
            decodeBytes(5)
