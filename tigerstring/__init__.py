"""tigerstring provides TigerString, a growable byte buffer used to accumulate generated text, and an
accumulator module which keeps one process-wide TigerString for a single writer.

Storage is allocated through cffi and grows by 1.5x of the required size when an append does not fit.
Buffers report appends and reallocations through a small event system.
"""

from tigerstring.accumulator import append_text, current_contents, initialize
from tigerstring.tiger_string import AllocationError, NotInitializedError, TigerString, TigerStringException

__all__ = [
    "TigerString",
    "TigerStringException",
    "AllocationError",
    "NotInitializedError",
    "initialize",
    "append_text",
    "current_contents",
]
