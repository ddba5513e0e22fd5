"""
`UString`: an owned, growable sequence of Unicode scalar values.

Reads are delegated to a full-extent `UStr` obtained from `as_ustr()`, so
indexing, slicing and comparison rules live in one place. Every mutation bumps
a generation counter, which invalidates views taken earlier.
"""

from array import array
from collections.abc import Iterator, MutableSequence
from functools import total_ordering
from typing import Iterable, Optional, Tuple

from ustring import _scalars
from ustring._view import UStr


@total_ordering
class UString(MutableSequence):
    """An owned sequence of Unicode scalar values, equivalent to `str` but mutable."""

    __slots__ = ("_cells", "_generation")

    def __init__(self, source=""):
        if isinstance(source, str):
            cells = _scalars.encode(source)
        elif isinstance(source, (UString, UStr)):
            cells = UStr(source)._span()
        else:
            raise TypeError(
                f"cannot build a UString from {type(source).__name__}; "
                "use UString.from_chars() or UString.from_codepoints() for iterables"
            )
        self._cells = cells
        self._generation = 0

    @classmethod
    def _adopt(cls, cells: array) -> "UString":
        owned = cls.__new__(cls)
        owned._cells = cells
        owned._generation = 0
        return owned

    @classmethod
    def from_str(cls, text: str) -> "UString":
        return cls._adopt(_scalars.encode(text))

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> "UString":
        return cls._adopt(array(_scalars.TYPECODE, map(_scalars.scalar_value, chars)))

    @classmethod
    def from_codepoints(cls, codes: Iterable[int]) -> "UString":
        return cls._adopt(_scalars.from_codepoints(codes))

    @classmethod
    def from_char(cls, char: str) -> "UString":
        return cls._adopt(array(_scalars.TYPECODE, [_scalars.scalar_value(char)]))

    def _touch(self) -> None:
        self._generation += 1

    def as_ustr(self) -> UStr:
        """Borrow the whole buffer as a view. The view goes stale on the next mutation."""
        return UStr._borrow(self, self._cells, 0, len(self._cells), self._generation)

    # region Read-only access, all through the view

    def __len__(self) -> int:
        return len(self.as_ustr())

    def __getitem__(self, key):
        return self.as_ustr()[key]

    def __iter__(self):
        return iter(self.as_ustr())

    def __reversed__(self):
        return reversed(self.as_ustr())

    def __contains__(self, needle) -> bool:
        return needle in self.as_ustr()

    def slice(self, start: Optional[int] = None, stop: Optional[int] = None) -> UStr:
        return self.as_ustr().slice(start, stop)

    def split_first(self) -> Optional[Tuple[str, UStr]]:
        return self.as_ustr().split_first()

    def split_last(self) -> Optional[Tuple[str, UStr]]:
        return self.as_ustr().split_last()

    def startswith(self, prefix) -> bool:
        return self.as_ustr().startswith(prefix)

    def endswith(self, suffix) -> bool:
        return self.as_ustr().endswith(suffix)

    def find(self, needle) -> int:
        return self.as_ustr().find(needle)

    def codepoints(self) -> memoryview:
        return self.as_ustr().codepoints()

    def __str__(self) -> str:
        return str(self.as_ustr())

    def __repr__(self) -> str:
        return f"ustring.UString({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self.as_ustr(), format_spec)

    def __eq__(self, other) -> bool:
        return self.as_ustr().__eq__(other)

    def __lt__(self, other) -> bool:
        return self.as_ustr().__lt__(other)

    def __hash__(self) -> int:
        return hash(self.as_ustr())

    def __add__(self, other):
        return self.as_ustr().__add__(other)

    def __radd__(self, other):
        return self.as_ustr().__radd__(other)

    # endregion

    # region Mutation

    def append(self, char: str) -> None:
        """Push one scalar value onto the end."""
        code = _scalars.scalar_value(char)
        self._cells.append(code)
        self._touch()

    def pop(self, index: int = -1) -> str:
        """
        Remove and return the character at `index`, shifting the tail left.

        Raises `IndexError` without touching the buffer when `index` is out of
        bounds, including on an empty string.
        """
        position = _scalars.normalize_index(index, len(self._cells))
        code = self._cells.pop(position)
        self._touch()
        return chr(code)

    def insert(self, index: int, char: str) -> None:
        code = _scalars.scalar_value(char)
        self._cells.insert(index, code)
        self._touch()

    def extend(self, values) -> None:
        """Append text, a view, another `UString` or an iterable of characters."""
        if isinstance(values, str):
            cells = _scalars.encode(values)
        elif isinstance(values, (UString, UStr)):
            # Copy first, so that `s.extend(s)` reads the old contents
            cells = UStr(values)._span()
        else:
            cells = array(_scalars.TYPECODE, map(_scalars.scalar_value, values))
        self._cells.extend(cells)
        self._touch()

    def __setitem__(self, key, value) -> None:
        length = len(self._cells)
        if isinstance(key, slice):
            lower, upper = _scalars.unpack_slice(key, length)
            replacement = UString(value) if isinstance(value, (str, UStr, UString)) else UString.from_chars(value)
            self._cells[lower:upper] = replacement._cells
        else:
            position = _scalars.normalize_index(key, length)
            self._cells[position] = _scalars.scalar_value(value)
        self._touch()

    def __delitem__(self, key) -> None:
        length = len(self._cells)
        if isinstance(key, slice):
            lower, upper = _scalars.unpack_slice(key, length)
            del self._cells[lower:upper]
        else:
            del self._cells[_scalars.normalize_index(key, length)]
        self._touch()

    def clear(self) -> None:
        del self._cells[:]
        self._touch()

    def truncate(self, length: int) -> None:
        """Shorten to `length` scalar values. Longer lengths leave the string as is."""
        if length < 0:
            raise ValueError(f"cannot truncate to a negative length {length}")
        if length < len(self._cells):
            del self._cells[length:]
            self._touch()

    def reverse(self) -> None:
        self._cells.reverse()
        self._touch()

    def drain(self) -> "Drain":
        """
        Move the contents out into a one-shot iterator.

        The `UString` is empty as soon as this returns; the iterator yields
        every former character exactly once, in order.
        """
        cells = self._cells
        self._cells = _scalars.empty()
        self._touch()
        return Drain(cells)

    # endregion

    def copy(self) -> "UString":
        return UString._adopt(self._cells[:])

    def __reduce__(self):
        return (self.__class__, (str(self),))


class Drain(Iterator):
    """By-value iterator produced by `UString.drain()`."""

    __slots__ = ("_cells", "_position")

    def __init__(self, cells: array):
        self._cells = cells
        self._position = 0

    def __next__(self) -> str:
        if self._position >= len(self._cells):
            self._cells = _scalars.empty()
            self._position = 0
            raise StopIteration
        code = self._cells[self._position]
        self._position += 1
        return chr(code)

    def __len__(self) -> int:
        return len(self._cells) - self._position
