"""Exception hierarchy for the binary byte type."""

from __future__ import annotations


class BinaryByteError(Exception):
    """
    Base exception for all binary byte errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ByteTypeError(BinaryByteError, TypeError):
    """
    Raised when a value has the wrong Python type for a byte operation.

    Attributes:
        expected_type: The type that was expected.
        actual_type: The actual type of the value.
    """

    def __init__(self, expected_type: str, actual_type: str) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(f"Expected {expected_type}, got {actual_type}")


class ByteValueError(BinaryByteError, ValueError):
    """
    Base class for value-related errors.

    Raised when a value has the right type but cannot form a byte.
    """


class InvalidPattern(ByteValueError):
    """
    Raised when a string cannot be read as an 8 bit binary pattern.

    The pattern must be exactly 8 characters, each '0' or '1'.
    """

    MESSAGE = "the string pattern should have exactly 8 '0'/'1' characters"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ByteOverflowError(ByteValueError):
    """
    Raised when a decimal value does not fit in a byte.

    Attributes:
        value: The value that caused the overflow.
        min_value: The minimum allowed value (inclusive).
        max_value: The maximum allowed value (inclusive).
    """

    def __init__(self, value: int, *, min_value: int, max_value: int) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value

        super().__init__(
            f"{value} is out of range for Byte (valid range: [{min_value}, {max_value}])"
        )


class ByteLengthError(ByteValueError):
    """
    Raised when bit data or encoded bytes have the wrong length.

    Attributes:
        what: What was being measured, e.g. "bits" or "bytes".
        expected: The exact length required.
        actual: The length received.
    """

    def __init__(self, what: str, *, expected: int, actual: int) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"Byte requires exactly {expected} {what}, got {actual}")


class BitIndexError(BinaryByteError, IndexError):
    """
    Raised on bit access outside the valid positions.

    Indexing past the last bit breaks the fixed width contract, so this is
    never clamped or wrapped.

    Attributes:
        index: The offending index.
        length: The number of addressable bits.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"bit index {index} out of range for Byte (valid: 0..{length - 1})")
