"""
Storage helpers shared by `UString` and `UStr`.

Scalar values live in an `array.array` of 4-byte unsigned cells. Conversions
to and from `str` go through the native-endian UTF-32 codec, which also
rejects lone surrogates and out-of-range code points for us.
"""

import operator
import sys
from array import array
from typing import Iterable, Tuple

# `I` is 4 bytes on every mainstream platform, `L` is the fallback on exotic ones
TYPECODE: str = next(code for code in "IL" if array(code).itemsize == 4)
CODEC: str = "utf-32-le" if sys.byteorder == "little" else "utf-32-be"

MAX_SCALAR = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def empty() -> array:
    return array(TYPECODE)


def encode(text: str) -> array:
    """Decode a Python string into a fresh buffer of scalar values."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    cells = array(TYPECODE)
    cells.frombytes(text.encode(CODEC))
    return cells


def decode(cells: array, start: int, stop: int) -> str:
    if start == stop:
        return ""
    return cells[start:stop].tobytes().decode(CODEC)


def scalar_value(char: str) -> int:
    """Validate a single character and return its code point."""
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character str, got {type(char).__name__}")
    if len(char) != 1:
        raise TypeError(f"expected a one-character str, got a str of length {len(char)}")
    code = ord(char)
    if code in SURROGATES:
        raise ValueError(f"lone surrogate {code:#06x} is not a Unicode scalar value")
    return code


def from_codepoints(codes: Iterable[int]) -> array:
    cells = array(TYPECODE)
    for code in codes:
        if not 0 <= code <= MAX_SCALAR or code in SURROGATES:
            raise ValueError(f"{code:#x} is not a Unicode scalar value")
        cells.append(code)
    return cells


def normalize_index(index: int, length: int) -> int:
    """Map a possibly negative position onto `[0, length)` or raise `IndexError`."""
    index = operator.index(index)
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise IndexError(f"index out of bounds: the len is {length} but the index is {index}")
    return index


def normalize_range(start, stop, length: int) -> Tuple[int, int]:
    """
    Resolve optional, possibly negative, bounds of a half-open range.

    Unlike `str` slicing, bounds are never clamped: anything outside
    `[0, length]` or an inverted range raises `IndexError`.
    """
    lower = 0 if start is None else operator.index(start)
    upper = length if stop is None else operator.index(stop)
    if lower < 0:
        lower += length
    if upper < 0:
        upper += length
    if lower < 0 or upper > length:
        raise IndexError(f"range {lower}..{upper} out of bounds for length {length}")
    if lower > upper:
        raise IndexError(f"range starts at {lower} but ends at {upper}")
    return lower, upper


def unpack_slice(key: slice, length: int) -> Tuple[int, int]:
    if key.step is not None and key.step != 1:
        raise TypeError("scalar string views do not support a step when slicing")
    return normalize_range(key.start, key.stop, length)
