"""
CFFI-backed storage for tiger strings.

Regions are plain ``char[]`` arrays owned by the returned cdata object; they
are released as soon as the last Python reference to them goes away.
"""

from cffi import FFI

ffi = FFI()


def allocate(size: int):
    """
    Allocate a zero-filled region of exactly ``size`` bytes.

    Args:
        size: Number of bytes to allocate

    Returns:
        cdata ``char[]`` owning the region

    Raises:
        MemoryError: If the region cannot be obtained
    """
    try:
        return ffi.new("char[]", size)
    except OverflowError as e:
        raise MemoryError(f"Region of {size} bytes is not addressable") from e


def copy(dest, offset: int, src, count: int) -> None:
    """Copy ``count`` bytes of ``src`` into ``dest`` starting at ``offset``."""
    if count:
        ffi.memmove(dest + offset, src, count)


def view(region, length: int) -> memoryview:
    """Read-only memoryview over the first ``length`` bytes of ``region``."""
    return memoryview(ffi.buffer(region, length)).toreadonly()
