"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details
"""

import pytest

from thorsig import InvalidArgumentError
from thorsig.crypto import hashing


def test_blake2b256():
    assert (
        hashing.blake2b256(b"").hex()
        == "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"
    )
    assert len(hashing.blake2b256(b"thor")) == hashing.HASH_SIZE
    assert hashing.blake2b256(bytearray(b"thor")) == hashing.blake2b256(b"thor")


def test_blake256():
    assert (
        hashing.blake256(b"").hex()
        == "716f6e863f744b9ac22c97ec7b76ea5f5908bc5b2f67c61510bfc4751384ea7a"
    )
    assert len(hashing.blake256(b"thor")) == hashing.HASH_SIZE


def test_sha256():
    assert (
        hashing.sha256(b"abc").hex()
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hashFunc():
    assert hashing.hashFunc() is hashing.blake2b256
    assert hashing.hashFunc(None) is hashing.HASHERS[hashing.DEFAULT_HASH]
    assert hashing.hashFunc("blake256") is hashing.blake256
    assert hashing.hashFunc("SHA256") is hashing.sha256
    with pytest.raises(InvalidArgumentError):
        hashing.hashFunc("md5")
