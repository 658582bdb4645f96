"""
Methods for encoding integers as fixed-width byte buffers
"""
from typing import Optional

from bitnets.core.exceptions import DataEncodingError
from bitnets.core.formats import NETWORK

__all__ = ["to_big_bytes", "integer_as_buffer", "buffer_as_integer"]


def to_big_bytes(num: int, length: Optional[int] = None) -> bytes:
    """
    Returns big-endian encoding of the given num. Will be of specified length if included
    """
    length = max((num.bit_length() + 7) // 8, 1) if length is None else length
    try:
        return num.to_bytes(length, "big")
    except OverflowError as e:
        raise DataEncodingError(f"Integer {num} does not fit in {length} bytes") from e


def integer_as_buffer(num: int) -> bytes:
    """
    Returns the 4-byte big-endian representation of an unsigned 32-bit integer.

    Used for the network magic bytes, e.g. 0xf9beb4d9 -> b'\\xf9\\xbe\\xb4\\xd9'
    """
    # bool is an int subclass but never a valid magic
    if not isinstance(num, int) or isinstance(num, bool):
        raise DataEncodingError(f"Expected integer but received: {type(num)}")
    if not 0 <= num <= NETWORK.MAX_U32:
        raise DataEncodingError(f"Integer {num} out of range for 32-bit unsigned encoding")
    return num.to_bytes(NETWORK.MAGIC_BYTES, "big")


def buffer_as_integer(data: bytes) -> int:
    """
    Returns the integer for a big-endian byte buffer
    """
    if not isinstance(data, (bytes, bytearray)):
        raise DataEncodingError(f"Expected bytes but received: {type(data)}")
    return int.from_bytes(data, "big")
