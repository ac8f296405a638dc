"""Constants used throughout the library."""

from __future__ import annotations

from typing import Final

BYTE_BITS: Final = 8
"""The number of bits in a byte."""

BYTE_MIN: Final = 0
"""The smallest decimal value a byte can hold."""

BYTE_MAX: Final = 2**BYTE_BITS - 1
"""The largest decimal value a byte can hold."""

ZERO_CHAR: Final = "0"
ONE_CHAR: Final = "1"
