"""
Fixed-width Unicode scalar value strings.

`UString` owns a growable buffer of scalar values; `UStr` is a zero-copy view
over a run of them. Indexing and slicing count scalar values, never bytes.
"""

from importlib.metadata import version

from ustring._view import UStr
from ustring._owned import Drain, UString

__version__ = version("ustring")

__all__ = ["UString", "UStr", "Drain", "__version__"]
