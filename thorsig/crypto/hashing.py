"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

Message digests that can be signed. BLAKE2b-256 is the hash used by the Thor
protocol and is the default.
"""

import hashlib

from blake256.blake256 import blake_hash

from thorsig import InvalidArgumentError


HASH_SIZE = 32

BLAKE2B = "blake2b"
BLAKE256 = "blake256"
SHA256 = "sha256"

DEFAULT_HASH = BLAKE2B


def blake2b256(b):
    """
    The 32-byte BLAKE2b hash.

    Args:
        b (bytes-like): The thing to hash.

    Returns:
        bytes: The hash.
    """
    return hashlib.blake2b(bytes(b), digest_size=HASH_SIZE).digest()


def blake256(b):
    """
    The BLAKE-256 hash.

    Args:
        b (bytes-like): The thing to hash.

    Returns:
        bytes: The hash.
    """
    return bytes(blake_hash(bytes(b)))


def sha256(b):
    """
    The SHA-256 hash.

    Args:
        b (bytes-like): The thing to hash.

    Returns:
        bytes: The hash.
    """
    return hashlib.sha256(bytes(b)).digest()


HASHERS = {
    BLAKE2B: blake2b256,
    BLAKE256: blake256,
    SHA256: sha256,
}


def hashFunc(name=None):
    """
    Look up a hash function by name.

    Args:
        name (str): optional. One of the HASHERS keys. Case-insensitive.
            Default is DEFAULT_HASH.

    Returns:
        func(bytes-like) -> bytes: The hash function.
    """
    name = (name or DEFAULT_HASH).lower()
    if name not in HASHERS:
        raise InvalidArgumentError(f"unknown hash function {name}")
    return HASHERS[name]
