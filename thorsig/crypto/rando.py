"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details
"""

import os

from thorsig import ThorSigError
from thorsig.util.encode import intFromBytes


MinSeedBytes = 16  # 128 bits
MaxSeedBytes = 64  # 512 bits


def checkSeedLength(length):
    """
    Check that seed length is correct.

    Args:
        length int: the seed length to be checked.

    Raises:
        ThorSigError if length is not between MinSeedBytes and MaxSeedBytes
        included.
    """
    if length < MinSeedBytes or length > MaxSeedBytes:
        raise ThorSigError(f"Invalid seed length {length}")


def generateSeed(length=MaxSeedBytes):
    """
    Generate a cryptographically-strong random seed.

    Returns:
        bytes: a random bytes object of the given length.

    Raises:
        ThorSigError if length is not between MinSeedBytes and MaxSeedBytes
        included.
    """
    checkSeedLength(length)
    return os.urandom(length)


def randScalar(order, bitSize):
    """
    randScalar returns a random integer in [1, order - 1] using the procedure
    given in [NSA] A.2.1. The 8 extra bytes of randomness make the modular
    bias negligible.

    Args:
        order (int): The group order.
        bitSize (int): The bit size of the group order.

    Returns:
        int: The random scalar.
    """
    k = intFromBytes(generateSeed(bitSize // 8 + 8))
    return k % (order - 1) + 1
