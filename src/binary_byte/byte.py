"""
Binary Byte Type Specification.

A `Byte` is an ordered, fixed-length sequence of exactly 8 bits stored as
booleans. Index 0 is the least significant bit and index 7 the most
significant one.

Two textual and numeric views are supported:

- Decimal: bit i of the byte is bit i of the value, i.e. `(value >> i) & 1`.
- Pattern: an 8 character string of '0'/'1' read as a standard binary
  literal, most significant bit first. `"00001000"` has only bit 3 set.

Bytes are plain values. Conversions always build new instances; the only
in-place mutation is a single-bit write through `set_bit` (or `byte[i] = ...`).
"""

from __future__ import annotations

import logging
import operator
from typing import Any, ClassVar, Iterator

from pydantic import Field, field_validator, model_validator
from typing_extensions import Self

from .base import FrozenBaseModel
from .constants import BYTE_BITS, BYTE_MAX, BYTE_MIN, ONE_CHAR, ZERO_CHAR
from .exceptions import (
    BitIndexError,
    ByteLengthError,
    ByteOverflowError,
    ByteTypeError,
    ByteValueError,
    InvalidPattern,
)

logger = logging.getLogger(__name__)


def _coerce_bit(value: Any) -> bool:
    """Accept only `True`, `False`, `1` or `0` as a bit."""
    if isinstance(value, bool):
        return value
    if not isinstance(value, int):
        raise ByteTypeError("bool or int", type(value).__name__)
    if value not in (0, 1):
        raise ByteValueError(f"Bit value must be 0 or 1, not {value}")
    return bool(value)


def _bit_position(index: Any) -> int:
    """Validate a bit index. Negative indices are out of range, not wrapped."""
    try:
        position = operator.index(index)
    except TypeError as e:
        raise ByteTypeError("int index", type(index).__name__) from e
    if not 0 <= position < BYTE_BITS:
        raise BitIndexError(position, BYTE_BITS)
    return position


def _bits_from_decimal(value: Any) -> tuple[bool, ...]:
    """Expand a decimal value into its 8 bits, least significant first."""
    if isinstance(value, bool):
        raise ByteTypeError("int", type(value).__name__)
    try:
        int_value = operator.index(value)
    except TypeError as e:
        raise ByteTypeError("int", type(value).__name__) from e
    if not BYTE_MIN <= int_value <= BYTE_MAX:
        raise ByteOverflowError(int_value, min_value=BYTE_MIN, max_value=BYTE_MAX)
    return tuple(bool((int_value >> i) & 1) for i in range(BYTE_BITS))


def _bits_from_pattern(pattern: Any) -> tuple[bool, ...]:
    """
    Read an 8 character binary pattern and return its bits least significant first.

    The last character is bit 0 and the first one is bit 7.

    Raises:
        InvalidPattern: If `pattern` is not a string of exactly 8 '0'/'1' characters.
    """
    if (
        not isinstance(pattern, str)
        or len(pattern) != BYTE_BITS
        or any(char not in (ZERO_CHAR, ONE_CHAR) for char in pattern)
    ):
        logger.debug("Rejected byte pattern %r", pattern)
        raise InvalidPattern()
    return tuple(char == ONE_CHAR for char in reversed(pattern))


class Byte(FrozenBaseModel):
    """
    A binary representation of a byte.

    Equality is bit for bit. Since single bits can be written in place, a
    Byte is not hashable.
    """

    LENGTH: ClassVar[int] = BYTE_BITS
    """Number of bits in a byte."""

    data: tuple[bool, ...] = Field(default_factory=lambda: (False,) * BYTE_BITS)
    """
    The bits, least significant first.

    Accepts any iterable of exactly 8 bool-like values (`True`/`False`/`1`/`0`);
    stored as a tuple of bool after validation. Defaults to all zeros.
    """

    __hash__ = None  # type: ignore[assignment]

    @model_validator(mode="before")
    @classmethod
    def _coerce_shorthand(cls, value: Any) -> Any:
        """Accept a decimal value or a binary pattern wherever a Byte is expected."""
        if isinstance(value, Byte):
            return {"data": value.data}
        if isinstance(value, str):
            return {"data": _bits_from_pattern(value)}
        if isinstance(value, int) and not isinstance(value, bool):
            return {"data": _bits_from_decimal(value)}
        return value

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_and_validate(cls, v: Any) -> tuple[bool, ...]:
        """Validate and convert input data to a tuple of exactly 8 bools."""
        try:
            if isinstance(v, (str, bytes)) or not hasattr(v, "__iter__"):
                raise ByteTypeError("iterable of bits", type(v).__name__)

            bits = tuple(v)
            if len(bits) != cls.LENGTH:
                raise ByteLengthError("bits", expected=cls.LENGTH, actual=len(bits))

            return tuple(_coerce_bit(bit) for bit in bits)
        except ByteTypeError as e:
            # Pydantic only wraps ValueError into a ValidationError.
            raise ValueError(str(e)) from e

    @classmethod
    def zero(cls) -> Self:
        """Create a byte with every bit cleared."""
        return cls()

    @classmethod
    def from_decimal(cls, value: int) -> Self:
        """
        Create a byte from its decimal value.

        Example:
            >>> str(Byte.from_decimal(15))
            '00001111'

        Raises:
            ByteTypeError: If `value` is not an integer.
            ByteOverflowError: If `value` is outside [0, 255].
        """
        return cls(data=_bits_from_decimal(value))

    @classmethod
    def from_pattern(cls, pattern: str) -> Self:
        """
        Create a byte from a string representing an 8 bit binary number.

        Example:
            >>> Byte.from_pattern("00001000").to_decimal()
            8

        Raises:
            InvalidPattern: If the pattern length is not exactly 8 or if any
                of its characters is not '0' or '1'.
        """
        return cls(data=_bits_from_pattern(pattern))

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserialize a single encoded byte.

        Raises:
            ByteLengthError: If `data` is not exactly one byte long.
        """
        if len(data) != 1:
            raise ByteLengthError("bytes", expected=1, actual=len(data))
        return cls.from_decimal(data[0])

    def encode_bytes(self) -> bytes:
        """Serialize to one byte, bit i at bit position i."""
        return bytes([self.to_decimal()])

    def to_decimal(self) -> int:
        """Return the decimal value of this byte, always in [0, 255]."""
        return sum(1 << i for i, bit in enumerate(self.data) if bit)

    def count_ones(self) -> int:
        """
        Return how many bits are set.

        Example:
            >>> Byte.from_decimal(15).count_ones()
            4
        """
        return self.data.count(True)

    def iter_bits(self) -> Iterator[bool]:
        """Iterate over the bits, least significant first and most significant last."""
        return iter(self.data)

    def get_bit(self, index: int) -> bool:
        """
        Read one bit. Index 0 is the least significant bit.

        Raises:
            BitIndexError: If `index` is outside 0..7.
        """
        return self.data[_bit_position(index)]

    def set_bit(self, index: int, value: bool) -> None:
        """
        Write one bit in place. Index 0 is the least significant bit.

        Raises:
            BitIndexError: If `index` is outside 0..7.
        """
        position = _bit_position(index)
        new_data = list(self.data)
        new_data[position] = _coerce_bit(value)
        object.__setattr__(self, "data", tuple(new_data))
        self.__pydantic_fields_set__.add("data")

    def to_pattern(self) -> str:
        """Render the 8 bits as '0'/'1' characters, most significant bit first."""
        return "".join(ONE_CHAR if bit else ZERO_CHAR for bit in reversed(self.data))

    def __getitem__(self, index: int) -> bool:
        """Get a bit by index."""
        return self.get_bit(index)

    def __setitem__(self, index: int, value: bool) -> None:
        """Set a bit by index."""
        self.set_bit(index, value)

    def __iter__(self) -> Iterator[bool]:  # type: ignore[override]
        """Iterate over the bits, least significant first."""
        return self.iter_bits()

    def __len__(self) -> int:
        """Return the number of bits, always 8."""
        return len(self.data)

    def __int__(self) -> int:
        return self.to_decimal()

    def __index__(self) -> int:
        return self.to_decimal()

    def __str__(self) -> str:
        return self.to_pattern()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_pattern()!r})"
