"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

secp256k1 group arithmetic. The field and point math is delegated to the
python-ecdsa package. This module exposes the small surface that signing and
recovery need, with ecdsa's errors translated into ThorSigError subclasses.

References:
  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf

  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf
"""

from ecdsa import SECP256k1
from ecdsa.ellipticcurve import INFINITY, PointJacobi
from ecdsa.errors import MalformedPointError
from ecdsa.numbertheory import inverse_mod

from thorsig import ThorSigError


COORDINATE_LEN = 32
PUBKEY_COMPRESSED_LEN = COORDINATE_LEN + 1
PUBKEY_LEN = 65
PUBKEY_COMPRESSED = 0x02  # 0x02 y_bit + x coord
PUBKEY_UNCOMPRESSED = 0x04  # 0x04 x coord + y coord


class InvalidPointError(ThorSigError):
    """
    The bytes or coordinates do not describe a point on the curve, or the
    point has no encoding (the point at infinity).
    """

    pass


class Curve:
    """
    Curve wraps the python-ecdsa secp256k1 domain parameters.
    """

    def __init__(self, params=SECP256k1):
        self.params = params
        self.G = params.generator
        self.N = params.order
        self.P = params.curve.p()
        self.A = params.curve.a()
        self.B = params.curve.b()
        self.BitSize = self.N.bit_length()
        # Byte length of a field element, which sizes the encoded coordinates.
        self.byteSize = (self.P.bit_length() + 7) // 8

    def scalarBaseMult(self, k):
        """
        scalarBaseMult returns k*G where G is the base point of the group.
        """
        return self.G * k

    def scalarMult(self, point, k):
        """
        scalarMult returns k*point.
        """
        return point * k

    def sumOfTwoMultiplies(self, pointA, kA, pointB, kB):
        """
        sumOfTwoMultiplies returns kA*pointA + kB*pointB, computed as one
        interleaved double multiplication when pointA supports it.
        """
        if isinstance(pointA, PointJacobi):
            return pointA.mul_add(kA, pointB, kB)
        return pointA * kA + pointB * kB

    @staticmethod
    def isInfinity(point):
        """
        True if the point is the group identity.
        """
        return point is INFINITY or point == INFINITY

    @staticmethod
    def modInv(a, m):
        """
        Modular inverse of a mod m.

        Raises:
            ThorSigError if a has no inverse mod m.
        """
        if a % m == 0:
            raise ThorSigError("modular inverse does not exist")
        return inverse_mod(a, m)

    def isOnCurve(self, x, y):
        """
        isOnCurve returns True if the affine point (x, y) satisfies
        y^2 = x^3 + 7 with both coordinates in the field.
        """
        if not (0 <= x < self.P and 0 <= y < self.P):
            return False
        return self.params.curve.contains_point(x, y)

    def decodePoint(self, pointB):
        """
        decodePoint parses a point encoded according to [SEC1] section 2.3.4:

          Compressed:
            <format byte = 0x02/0x03><32-byte X coordinate>
          Uncompressed:
            <format byte = 0x04><32-byte X coordinate><32-byte Y coordinate>

        The hybrid and raw formats are not accepted.

        Args:
            pointB (bytes-like): The encoded point.

        Returns:
            PointJacobi: The decoded point.

        Raises:
            InvalidPointError if the bytes don't encode a point on the curve.
        """
        pointB = bytes(pointB)
        pkLen = len(pointB)
        if pkLen == 0:
            raise InvalidPointError("empty point encoding")
        fmt = pointB[0]
        if pkLen == PUBKEY_LEN:
            if fmt != PUBKEY_UNCOMPRESSED:
                raise InvalidPointError("invalid magic in point: %d" % fmt)
        elif pkLen == PUBKEY_COMPRESSED_LEN:
            if fmt & 0xFE != PUBKEY_COMPRESSED:
                raise InvalidPointError("invalid magic in compressed point: %d" % fmt)
        else:
            raise InvalidPointError("invalid point length %d" % pkLen)

        if int.from_bytes(pointB[1 : 1 + COORDINATE_LEN], "big") >= self.P:
            raise InvalidPointError("point X coordinate is >= to P")
        try:
            point = PointJacobi.from_bytes(
                self.params.curve,
                pointB,
                valid_encodings=("compressed", "uncompressed"),
            )
        except MalformedPointError as e:
            raise InvalidPointError(f"invalid point encoding: {e}")
        if not self.isOnCurve(point.x(), point.y()):
            raise InvalidPointError("point isn't on the secp256k1 curve")
        return point

    def encodePoint(self, point, compressed):
        """
        encodePoint serializes a point in the 33-byte compressed or 65-byte
        uncompressed format.

        Raises:
            InvalidPointError for the point at infinity.
        """
        if self.isInfinity(point):
            raise InvalidPointError("cannot encode the point at infinity")
        return point.to_bytes("compressed" if compressed else "uncompressed")


curve = Curve()
