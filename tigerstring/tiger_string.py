"""
TigerString: a growable byte buffer for accumulating generated text.

Bytes are only ever appended at the end. When an append does not fit, the
storage is reallocated to 1.5x the size the append needs, the existing
content is carried over and the old region is dropped, which keeps repeated
appends amortised O(1).
"""

import array
import mmap
from typing import Optional, Union

from . import _native
from .events import EventSource

DEFAULT_CAPACITY = 32
DEFAULT_GROWTH_FACTOR = 1.5

# append() takes any object exposing the buffer protocol, these are the usual ones
BytesLike = Union[str, bytes, bytearray, memoryview, array.array, mmap.mmap]


class TigerStringException(Exception):
    """Exception raised when a TigerString cannot carry out an operation."""


class AllocationError(TigerStringException, MemoryError):
    """Storage for a TigerString could not be allocated.

    Nothing about the buffer has changed when this is raised, but callers are
    expected to treat it as fatal.
    """


class NotInitializedError(TigerStringException):
    """The accumulator was used before initialize() installed a buffer."""


class TigerString(EventSource):
    """A byte buffer with explicit length and capacity that grows on append

    Apart from the buffer API, listeners can be attached through the API
    inherited from events.EventSource (add_listener, add_catch_all_listener,
    remove_listener, auto_listen).

    Events:
        TigerString.APPEND_EVENT (str): Fired after bytes were appended, with the
            number of bytes as the only parameter
        TigerString.GROW_EVENT (str): Fired after the storage was reallocated, with
            the old and the new capacity as parameters
        TigerString.CLOSE_EVENT (str): Fired once when the storage is released
    """

    APPEND_EVENT = "append"
    GROW_EVENT = "grow"
    CLOSE_EVENT = "close"
    EVENTS = (APPEND_EVENT, GROW_EVENT, CLOSE_EVENT)

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        growth_factor: float = DEFAULT_GROWTH_FACTOR,
        max_size: Optional[int] = None,
    ) -> None:
        """Create an empty TigerString

        Args:
            initial_capacity: Bytes allocated up front (default: 32)
            growth_factor: Multiplier applied to the required size when the
                storage has to grow, must be greater than 1 (default: 1.5)
            max_size: Maximum number of bytes the buffer may hold. None means
                unlimited. (default: None)

        Raises:
            AllocationError: If the initial storage cannot be allocated
        """
        super().__init__()
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise TypeError(f"initial_capacity must be an int, not {type(initial_capacity).__name__}")
        if initial_capacity <= 0:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        if growth_factor <= 1:
            raise ValueError(f"growth_factor must be greater than 1, got {growth_factor}")
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")

        self._growth_factor = growth_factor
        self._max_size = max_size
        self._length = 0
        self._capacity = initial_capacity
        self._storage = self._allocate(initial_capacity)

    @property
    def length(self) -> int:
        """Number of bytes currently stored"""
        return self._length

    @property
    def capacity(self) -> int:
        """Number of bytes currently allocated"""
        return self._capacity

    @property
    def closed(self) -> bool:
        return self._storage is None

    def append(self, data: BytesLike, count: Optional[int] = None) -> int:
        """Copy the first ``count`` bytes of ``data`` to the end of the buffer

        Any view previously returned by contents() stops reflecting the
        buffer if this call has to reallocate.

        Args:
            data: Any object supporting the buffer protocol (bytes, bytearray,
                memoryview, array.array, mmap, ...), contiguous or not. A str
                is encoded as UTF-8 first and ``count`` then counts encoded bytes.
            count: Number of leading bytes of ``data`` to copy. None copies
                all of it. (default: None)

        Returns:
            The number of bytes appended

        Raises:
            AllocationError: If growing the storage fails; the buffer is left untouched
            TigerStringException: If the buffer is closed or ``max_size`` would be exceeded
            ValueError: If ``count`` is negative or larger than ``data``

        Examples:
            >>> s = TigerString()
            >>> s.append(b"hello world", 5)
            5
            >>> bytes(s)
            b'hello'
        """
        self._check_open()
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = memoryview(data)
        if not data.c_contiguous:
            data = memoryview(data.tobytes())
        data = data.cast("B")

        if count is None:
            count = data.nbytes
        elif isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, not {type(count).__name__}")
        if count < 0 or count > data.nbytes:
            raise ValueError(f"count {count} out of range for {data.nbytes} bytes of data")
        if count == 0:
            return 0

        required = self._length + count
        if self._max_size is not None and required > self._max_size:
            raise TigerStringException(f"Size {required} exceeds maximum of {self._max_size}")
        if required > self._capacity:
            self._grow(required)

        _native.copy(self._storage, self._length, data, count)
        self._length = required
        self.fire(TigerString.APPEND_EVENT, count)
        return count

    def write(self, data: BytesLike) -> int:
        """File-like alias for append() taking the whole of ``data``

        Returns:
            The number of bytes written
        """
        return self.append(data)

    def contents(self) -> memoryview:
        """Read-only view of the stored bytes

        The view is not a copy. It is only guaranteed to match the buffer
        until the next append that reallocates.
        """
        self._check_open()
        return _native.view(self._storage, self._length)

    def close(self) -> None:
        """Release the storage. Further appends and reads raise TigerStringException."""
        if self._storage is None:
            return
        self._storage = None
        self._length = 0
        self._capacity = 0
        self.fire(TigerString.CLOSE_EVENT)

    def _grow(self, required: int) -> None:
        new_capacity = int(required * self._growth_factor)
        storage = self._allocate(new_capacity)
        _native.copy(storage, 0, self._storage, self._length)

        old_capacity = self._capacity
        self._storage = storage
        self._capacity = new_capacity
        self.fire(TigerString.GROW_EVENT, old_capacity, new_capacity)

    @staticmethod
    def _allocate(size: int):
        try:
            return _native.allocate(size)
        except MemoryError as e:
            raise AllocationError(f"Could not allocate {size} bytes") from e

    def _check_open(self) -> None:
        if self._storage is None:
            raise TigerStringException("I/O operation on closed TigerString")

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return self.contents().tobytes()

    def __str__(self) -> str:
        """Contents decoded as UTF-8, undecodable bytes replaced"""
        return bytes(self).decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        if self.closed:
            return "<TigerString closed>"
        return f"<TigerString length={self._length} capacity={self._capacity}>"

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - releases the storage"""
        self.close()
        return False
