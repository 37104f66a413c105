"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

Integer and byte conversions.
"""

from thorsig import InvalidArgumentError


def intToBytes(i, signed=False):
    """
    Encodes an integer to the minimal number of bytes.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a signed integer.

    Returns:
        bytes: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return i.to_bytes(length, byteorder="big", signed=signed)


def intFromBytes(b, signed=False):
    """
    Decodes an integer from big-endian bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def toBytesPadded(value, length):
    """
    Encode a non-negative integer as exactly `length` big-endian bytes, left
    padded with zeros.

    Args:
        value (int): The integer to encode.
        length (int): The output length.

    Returns:
        bytes: The padded encoding.

    Raises:
        InvalidArgumentError if the value is negative or does not fit.
    """
    if value < 0:
        raise InvalidArgumentError("cannot pad a negative integer")
    b = intToBytes(value)
    if len(b) > length:
        raise InvalidArgumentError(
            f"input is too large to put in byte array of size {length}"
        )
    return bytes(length - len(b)) + b


def decodeBytes(b):
    """
    Decode into bytes.

    Args:
        b (str, bytes-like, list(int)): The value to decode. Strings are
            interpreted as hexadecimal, with an optional 0x prefix.

    Returns:
        bytes: The decoded bytes.
    """
    if isinstance(b, bytes):
        return b
    if isinstance(b, (bytearray, memoryview)):
        return bytes(b)
    if isinstance(b, str):
        if b[:2].lower() == "0x":
            b = b[2:]
        try:
            return bytes.fromhex(b)
        except ValueError:
            raise InvalidArgumentError(f"invalid hex string {b!r}")
    if hasattr(b, "__iter__"):
        return bytes(b)
    raise TypeError("decodeBytes: unknown type %s" % type(b))
