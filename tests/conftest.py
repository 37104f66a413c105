"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details
"""

import random

import pytest

from thorsig.crypto.keys import ECKeyPair
from thorsig.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


class StubKeyPair(ECKeyPair):
    """
    A key pair whose base signature primitive returns a fixed signature.
    """

    def __init__(self, privateKey, sig):
        super().__init__(privateKey)
        self.stubSig = sig
        self.digests = []

    def sign(self, digest):
        self.digests.append(bytes(digest))
        return self.stubSig


@pytest.fixture
def stubKeyPair():
    return StubKeyPair
