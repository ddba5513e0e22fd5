"""
`UStr`: a borrowed, read-only window over the scalar values of a `UString`.

A view is the triple `(cells, start, stop)` plus a reference to the owning
`UString`. Creating or narrowing a view never copies cells. The owner is kept
alive by that reference, but its contents may still change underneath the view,
so every access asserts that the owner has not been mutated since the view was
taken. Like any `assert`, the check disappears under `python -O`.
"""

import operator
from array import array
from collections.abc import Sequence
from functools import total_ordering
from typing import Iterator, Optional, Tuple

from ustring import _scalars

STALE_VIEW = "UStr used after its UString was mutated"


@total_ordering
class UStr(Sequence):
    """A Unicode string slice, equivalent to `str`, indexed by scalar value."""

    __slots__ = ("_owner", "_cells", "_start", "_stop", "_generation")

    def __init__(self, source):
        from ustring._owned import UString  # local import

        if isinstance(source, UString):
            source = source.as_ustr()
        if not isinstance(source, UStr):
            raise TypeError(
                f"UStr borrows from a UString or another UStr, not {type(source).__name__}; "
                "use UString(text).as_ustr() to view a str"
            )
        assert source._live(), STALE_VIEW
        self._owner = source._owner
        self._cells = source._cells
        self._start = source._start
        self._stop = source._stop
        self._generation = source._generation

    @classmethod
    def _borrow(cls, owner, cells: array, start: int, stop: int, generation: int) -> "UStr":
        view = cls.__new__(cls)
        view._owner = owner
        view._cells = cells
        view._start = start
        view._stop = stop
        view._generation = generation
        return view

    def _live(self) -> bool:
        return self._generation == self._owner._generation

    def _narrow(self, lower: int, upper: int) -> "UStr":
        return UStr._borrow(self._owner, self._cells, self._start + lower, self._start + upper, self._generation)

    def _span(self) -> array:
        return self._cells[self._start : self._stop]

    def _text(self) -> str:
        assert self._live(), STALE_VIEW
        return _scalars.decode(self._cells, self._start, self._stop)

    # region Sequence protocol

    def __len__(self) -> int:
        assert self._live(), STALE_VIEW
        return self._stop - self._start

    def __getitem__(self, key):
        assert self._live(), STALE_VIEW
        length = self._stop - self._start
        if isinstance(key, slice):
            lower, upper = _scalars.unpack_slice(key, length)
            return self._narrow(lower, upper)
        position = _scalars.normalize_index(operator.index(key), length)
        return chr(self._cells[self._start + position])

    def __iter__(self) -> Iterator[str]:
        cells = self._cells
        for position in range(self._start, self._stop):
            assert self._live(), STALE_VIEW
            yield chr(cells[position])

    def __reversed__(self) -> Iterator[str]:
        cells = self._cells
        for position in range(self._stop - 1, self._start - 1, -1):
            assert self._live(), STALE_VIEW
            yield chr(cells[position])

    def __contains__(self, needle) -> bool:
        return self.find(needle) != -1

    # endregion

    # region Slicing and predicates

    def slice(self, start: Optional[int] = None, stop: Optional[int] = None) -> "UStr":
        """
        Narrow the view to `[start, stop)` without copying.

        Omitting `start` means "from the beginning", omitting `stop` means
        "to the end". Negative bounds count from the end. Bounds are never
        clamped: a bound past `len(self)` or `start > stop` raises `IndexError`.
        """
        assert self._live(), STALE_VIEW
        lower, upper = _scalars.normalize_range(start, stop, self._stop - self._start)
        return self._narrow(lower, upper)

    def split_first(self) -> Optional[Tuple[str, "UStr"]]:
        """Return the first character and a view over the rest, or `None` if empty."""
        if not len(self):
            return None
        return self[0], self[1:]

    def split_last(self) -> Optional[Tuple[str, "UStr"]]:
        """Return the last character and a view over everything before it, or `None` if empty."""
        if not len(self):
            return None
        return self[-1], self[:-1]

    def startswith(self, prefix) -> bool:
        cells, start, stop = _operand(prefix)
        width = stop - start
        if width > len(self):
            return False
        return self._cells[self._start : self._start + width] == cells[start:stop]

    def endswith(self, suffix) -> bool:
        cells, start, stop = _operand(suffix)
        width = stop - start
        if width > len(self):
            return False
        return self._cells[self._stop - width : self._stop] == cells[start:stop]

    def find(self, needle) -> int:
        """Offset of the first occurrence of `needle`, in scalar values, or -1."""
        if isinstance(needle, str):
            return self._text().find(needle)
        cells, start, stop = _operand(needle)
        return self._text().find(_scalars.decode(cells, start, stop))

    def codepoints(self) -> memoryview:
        """
        Zero-copy `memoryview` of the code points, with format `I` or `L`.

        NumPy accepts it directly: `np.asarray(view.codepoints())`. While the
        memoryview is alive the owner cannot grow or shrink, so release it
        before mutating the `UString`.
        """
        assert self._live(), STALE_VIEW
        return memoryview(self._cells)[self._start : self._stop]

    # endregion

    # region Conversions

    def to_owned(self):
        from ustring._owned import UString  # local import

        assert self._live(), STALE_VIEW
        return UString._adopt(self._span())

    def __str__(self) -> str:
        return self._text()

    def __repr__(self) -> str:
        return f"ustring.UStr({self._text()!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self._text(), format_spec)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        joined = self.to_owned()
        joined.extend(other)
        return joined

    def __radd__(self, other):
        from ustring._owned import UString  # local import

        if not isinstance(other, str):
            return NotImplemented
        joined = UString(other)
        joined.extend(self)
        return joined

    # endregion

    # region Comparisons

    def __eq__(self, other) -> bool:
        if isinstance(other, str):
            return self._text() == other
        if not _is_operand(other):
            return NotImplemented
        cells, start, stop = _operand(other)
        if stop - start != len(self):
            return False
        return self._span() == cells[start:stop]

    def __lt__(self, other) -> bool:
        if isinstance(other, str):
            return self._text() < other
        if not _is_operand(other):
            return NotImplemented
        cells, start, stop = _operand(other)
        assert self._live(), STALE_VIEW
        return self._span() < cells[start:stop]

    def __hash__(self) -> int:
        # Must agree with `str` so that views, owned strings and `str` keys mix in a `dict`
        return hash(self._text())

    # endregion


def _is_operand(value) -> bool:
    from ustring._owned import UString  # local import

    return isinstance(value, (str, UStr, UString))


def _operand(value) -> Tuple[array, int, int]:
    """Resolve a `str`, `UStr` or `UString` argument to `(cells, start, stop)`."""
    from ustring._owned import UString  # local import

    if isinstance(value, UString):
        value = value.as_ustr()
    if isinstance(value, UStr):
        assert value._live(), STALE_VIEW
        return value._cells, value._start, value._stop
    if isinstance(value, str):
        cells = _scalars.encode(value)
        return cells, 0, len(cells)
    raise TypeError(f"expected str, UStr or UString, got {type(value).__name__}")
