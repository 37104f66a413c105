"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

Recoverable ECDSA signatures. A signature is serialized as r || s || v, where
v is the recovery id that lets a verifier reconstruct the signer's public key
from the signature and the message alone.

References:
  [SEC1] Elliptic Curve Cryptography, section 4.1.6 Public Key Recovery
    https://www.secg.org/sec1-v2.pdf
"""

from thorsig import ThorSigError, verifyPrecondition
from thorsig.util import helpers
from thorsig.util.encode import intFromBytes, toBytesPadded

from . import hashing
from .secp256k1.curve import InvalidPointError, curve as Curve


SIGNATURE_PART_LEN = 32
SIGNATURE_LEN = 2 * SIGNATURE_PART_LEN + 1

log = helpers.getLogger("ECDSA")


class SignError(ThorSigError):
    """
    A signature could not be produced in a form the target protocol accepts,
    or a signature did not yield a public key.
    """

    pass


class SignatureData:
    """
    SignatureData is the (v, r, s) signature record. r and s are big-endian
    bytes and v is the recovery id.
    """

    __slots__ = ("_v", "_r", "_s")

    def __init__(self, v, r, s):
        """
        Args:
            v (int): The recovery id byte.
            r (bytes-like): The r value, 32 bytes for signed records.
            s (bytes-like): The s value, 32 bytes for signed records.
        """
        verifyPrecondition(0 <= v <= 0xFF, f"v must fit in a byte, got {v}")
        self._v = v
        self._r = bytes(r)
        self._s = bytes(s)

    @property
    def v(self):
        return self._v

    @property
    def r(self):
        return self._r

    @property
    def s(self):
        return self._s

    @staticmethod
    def fromBytes(b):
        """
        Parse a serialized r || s || v signature.

        Args:
            b (bytes-like): The 65-byte signature.

        Returns:
            SignatureData: The signature record.
        """
        b = bytes(b)
        verifyPrecondition(
            len(b) == SIGNATURE_LEN,
            f"signature must be {SIGNATURE_LEN} bytes, got {len(b)}",
        )
        return SignatureData(
            b[-1], b[:SIGNATURE_PART_LEN], b[SIGNATURE_PART_LEN : 2 * SIGNATURE_PART_LEN]
        )

    def toBytes(self):
        """
        Serialize the signature. r bytes, then s bytes, then the v byte.

        Returns:
            bytes: The serialized signature.
        """
        return self._r + self._s + bytes((self._v,))

    def hex(self):
        return self.toBytes().hex()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, SignatureData):
            return NotImplemented
        return self._v == other._v and self._r == other._r and self._s == other._s

    def __hash__(self):
        return hash((self._v, self._r, self._s))

    def __repr__(self):
        return f"SignatureData(v={self._v}, r={self._r.hex()}, s={self._s.hex()})"


def _messageHash(message, needToHash, hashName):
    verifyPrecondition(message is not None, "message cannot be null")
    if needToHash:
        return hashing.hashFunc(hashName)(message)
    return bytes(message)


def signMessage(message, keyPair, needToHash=True, hashName=None):
    """
    Sign the message with the key pair. Only recovery ids 0 and 1 are accepted
    by the target protocol. If the signature only recovers to the signer's key
    with id 2 or 3, signing fails and the caller may try again.

    Args:
        message (bytes-like): The message to sign.
        keyPair (ECKeyPair): The signer.
        needToHash (bool): optional. If True, the message is hashed with the
            hash function before signing. If False, the message is signed
            directly and must already be a digest. Default True.
        hashName (str): optional. Name of the hash function. Default is the
            protocol hash, BLAKE2b-256.

    Returns:
        SignatureData: The signature.

    Raises:
        SignError if no supported recovery id reproduces the public key.
    """
    publicKey = keyPair.publicKey
    messageHash = _messageHash(message, needToHash, hashName)

    sig = keyPair.sign(messageHash)
    recId = _findRecoveryId(sig, messageHash, publicKey)

    if recId is None:
        log.warning("no recovery id reproduced the signing key")
        raise SignError("no matching recovery id")

    if recId in (2, 3):
        log.warning(f"signature recovers only with unsupported id {recId}")
        raise SignError("recovery id unsupported by target protocol")

    log.debug(f"signed message hash {messageHash.hex()} with recovery id {recId}")
    return SignatureData(
        recId,
        toBytesPadded(sig.r, SIGNATURE_PART_LEN),
        toBytesPadded(sig.s, SIGNATURE_PART_LEN),
    )


def _findRecoveryId(sig, messageHash, publicKey):
    """
    The first id in 0..3 that recovers publicKey, or None.
    """
    for i in range(4):
        q = _recoverPoint(i, sig, messageHash)
        if q is not None and pointToPublicKey(q) == publicKey:
            return i
    return None


def recoverFromSignature(recId, sig, message):
    """
    Recover the public key from a signature and the message hash it signs.
    Every rejected candidate results in None rather than an exception, since
    trying the wrong recovery id is expected.

    Args:
        recId (int): The recovery id, 0 or 1.
        sig (ECDSASignature): The signature.
        message (bytes-like): The signed message hash.

    Returns:
        int or None: The public key, or None if there is no candidate for
            this recovery id.
    """
    verifyPrecondition(recId in (0, 1), "recId must be 0 or 1")
    verifyPrecondition(sig.r >= 0, "r must be positive")
    verifyPrecondition(sig.s >= 0, "s must be positive")
    verifyPrecondition(message is not None, "message cannot be null")

    q = _recoverPoint(recId, sig, bytes(message))
    if q is None:
        return None
    return pointToPublicKey(q)


def _recoverPoint(recId, sig, message):
    """
    Public key recovery, [SEC1] 4.1.6. Ids 2 and 3 select x = r + n, the
    x-overflow case. Returns the recovered point or None.
    """
    n = Curve.N
    i = recId // 2
    x = sig.r + i * n

    # The x coordinate must be a field element.
    if x >= Curve.P:
        return None

    try:
        R = decompressKey(x, (recId & 1) == 1)
    except InvalidPointError:
        return None

    # nR must be the point at infinity.
    if not Curve.isInfinity(Curve.scalarMult(R, n)):
        return None

    if sig.r % n == 0:
        return None

    e = intFromBytes(message)

    # Q = r^-1 (sR - eG), rearranged as (-e * r^-1)G + (s * r^-1)R.
    eInv = (-e) % n
    rInv = Curve.modInv(sig.r, n)
    srInv = (rInv * sig.s) % n
    eInvrInv = (rInv * eInv) % n
    q = Curve.sumOfTwoMultiplies(Curve.G, eInvrInv, R, srInv)

    if Curve.isInfinity(q):
        return None
    return q


def decompressKey(x, yBit):
    """
    decompressKey finds the curve point with the given x coordinate and y
    parity.

    Args:
        x (int): The x coordinate.
        yBit (bool): True for an odd y.

    Returns:
        PointJacobi: The point.

    Raises:
        InvalidPointError if x is not the x coordinate of a curve point.
    """
    if x < 0 or x.bit_length() > 8 * Curve.byteSize:
        raise InvalidPointError(f"x coordinate {x:x} out of range")
    compEnc = bytes((0x03 if yBit else 0x02,)) + toBytesPadded(x, Curve.byteSize)
    return Curve.decodePoint(compEnc)


def pointToPublicKey(point):
    """
    The public key integer for a point, the uncompressed encoding without the
    leading format byte.
    """
    encoded = Curve.encodePoint(point, compressed=False)
    return intFromBytes(encoded[1:])


def reduceScalar(privKey):
    """
    The private key, reduced modulo the group order if it is longer than the
    order.
    """
    if privKey.bit_length() > Curve.BitSize:
        return privKey % Curve.N
    return privKey


def publicPointFromPrivate(privKey):
    """
    Returns the public key point for the given private key.
    """
    return Curve.scalarBaseMult(reduceScalar(privKey))


def publicKeyFromPrivate(privKey):
    """
    Returns the public key integer for the given private key.

    Args:
        privKey (int): The private scalar.

    Returns:
        int: The public key.

    Raises:
        InvalidPointError if the scalar is a multiple of the group order.
    """
    return pointToPublicKey(publicPointFromPrivate(privKey))


def signedMessageToKey(message, sigData, needToHash=True, hashName=None):
    """
    Recover the signer's public key from a message and its SignatureData.

    Args:
        message (bytes-like): The message that was signed.
        sigData (SignatureData): The signature.
        needToHash (bool): optional. Whether the message was hashed before
            signing. Default True.
        hashName (str): optional. Name of the hash function.

    Returns:
        int: The public key.

    Raises:
        SignError if the signature does not recover to a key.
    """
    # Deferred import. keys imports this module.
    from .keys import ECDSASignature

    verifyPrecondition(sigData.v in (0, 1), f"invalid recovery id {sigData.v}")
    messageHash = _messageHash(message, needToHash, hashName)
    sig = ECDSASignature(intFromBytes(sigData.r), intFromBytes(sigData.s))
    key = recoverFromSignature(sigData.v, sig, messageHash)
    if key is None:
        raise SignError("could not recover public key from signature")
    return key
