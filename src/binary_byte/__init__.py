"""A single byte represented as an explicit array of 8 boolean bits."""

from .byte import Byte
from .constants import BYTE_BITS, BYTE_MAX, BYTE_MIN
from .exceptions import (
    BinaryByteError,
    BitIndexError,
    ByteLengthError,
    ByteOverflowError,
    ByteTypeError,
    ByteValueError,
    InvalidPattern,
)

__all__ = [
    # Core types
    "Byte",
    "BYTE_BITS",
    "BYTE_MIN",
    "BYTE_MAX",
    # Exceptions
    "BinaryByteError",
    "BitIndexError",
    "ByteLengthError",
    "ByteOverflowError",
    "ByteTypeError",
    "ByteValueError",
    "InvalidPattern",
]
