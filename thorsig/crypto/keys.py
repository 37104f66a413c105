"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

secp256k1 key pairs and the base ECDSA signature primitive. The signature
itself is computed by python-ecdsa; nonces are RFC 6979 deterministic unless
a key pair is created with deterministic=False.
"""

import hashlib

from ecdsa import SigningKey

from thorsig import verifyPrecondition
from thorsig.util.encode import toBytesPadded

from . import rando
from .ecdsasign import publicKeyFromPrivate
from .secp256k1.curve import curve as Curve


def _sigencodeInts(r, s, order):
    """A python-ecdsa sigencode function that leaves r and s as integers."""
    return r, s


class ECDSASignature:
    """
    The (r, s) pair produced by the base signature primitive.
    """

    def __init__(self, r, s):
        self.r = r
        self.s = s

    def isCanonical(self):
        """
        True if s is in the lower half of the group order. Ethereum-derived
        ledgers reject the high-s twin of a signature to remove malleability.
        """
        return self.s <= Curve.N // 2

    def toCanonicalised(self):
        """
        The low-s form of the signature. If s is in the upper half of the group
        order, s is replaced by N - s, which is an equally valid signature for
        the same message and key.

        Returns:
            ECDSASignature: A canonical signature.
        """
        if self.isCanonical():
            return self
        return ECDSASignature(self.r, Curve.N - self.s)

    def __eq__(self, other):
        if not isinstance(other, ECDSASignature):
            return NotImplemented
        return self.r == other.r and self.s == other.s

    def __hash__(self):
        return hash((self.r, self.s))

    def __repr__(self):
        return f"ECDSASignature(r={self.r:064x}, s={self.s:064x})"


class ECKeyPair:
    """
    ECKeyPair owns a private scalar and the public key derived from it. The
    public key is the 64-byte uncompressed point encoding, without the 0x04
    prefix, as an integer.
    """

    def __init__(self, privateKey, deterministic=True):
        """
        Args:
            privateKey (int): The private scalar.
            deterministic (bool): optional. Use RFC 6979 nonces when signing.
                Default True. With False, nonces are drawn from os.urandom.
        """
        verifyPrecondition(privateKey >= 0, "private key must be positive")
        self._privateKey = privateKey
        self._publicKey = publicKeyFromPrivate(privateKey)
        self.deterministic = deterministic

    @property
    def privateKey(self):
        return self._privateKey

    @property
    def publicKey(self):
        """The public key integer, x || y."""
        return self._publicKey

    @staticmethod
    def create(privateKey, deterministic=True):
        """
        Create a key pair from a private key.

        Args:
            privateKey (int or bytes-like): The private key. Bytes are read as
                a big-endian integer.
            deterministic (bool): optional. See ECKeyPair.

        Returns:
            ECKeyPair: The key pair.
        """
        if not isinstance(privateKey, int):
            privateKey = int.from_bytes(bytes(privateKey), "big")
        return ECKeyPair(privateKey, deterministic)

    @staticmethod
    def generate(deterministic=True):
        """
        Generate a key pair from a random private scalar.

        Returns:
            ECKeyPair: The new key pair.
        """
        return ECKeyPair(rando.randScalar(Curve.N, Curve.BitSize), deterministic)

    def privateKeyBytes(self):
        """The private key as 32 big-endian bytes."""
        return toBytesPadded(self.privateKey % Curve.N, 32)

    def publicKeyBytes(self):
        """The public key as 64 bytes, x || y."""
        return toBytesPadded(self.publicKey, 64)

    def sign(self, digest):
        """
        Sign a message digest. The returned signature is canonical (low-s).

        Args:
            digest (bytes-like): The digest. Must be non-empty and no longer
                than the group order, i.e. 1 to 32 bytes.

        Returns:
            ECDSASignature: The signature.
        """
        digest = bytes(digest)
        verifyPrecondition(
            0 < len(digest) <= Curve.BitSize // 8,
            f"digest must be 1 to {Curve.BitSize // 8} bytes, got {len(digest)}",
        )
        # Signing is done mod N, like key derivation.
        secexp = self.privateKey % Curve.N
        verifyPrecondition(secexp != 0, "private key out of range")
        sk = SigningKey.from_secret_exponent(
            secexp, curve=Curve.params, hashfunc=hashlib.sha256
        )
        if self.deterministic:
            r, s = sk.sign_digest_deterministic(digest, sigencode=_sigencodeInts)
        else:
            r, s = sk.sign_digest(digest, sigencode=_sigencodeInts)
        return ECDSASignature(r, s).toCanonicalised()

    def __eq__(self, other):
        if not isinstance(other, ECKeyPair):
            return NotImplemented
        return self.privateKey == other.privateKey

    def __hash__(self):
        return hash(self.privateKey)
