"""
Process-wide tiger string for a single writer.

Code generators call initialize() once, append_text() as output is produced
and current_contents() when the output is needed, without passing a buffer
around. Code that needs more than one buffer should create TigerString
objects directly instead.
"""

import sys
from typing import Optional

from .tiger_string import AllocationError, BytesLike, NotInitializedError, TigerString

_current: Optional[TigerString] = None


def initialize(**config) -> TigerString:
    """Install a fresh TigerString as the current buffer

    Whatever was accumulated before is discarded.

    Args:
        **config: Forwarded to TigerString (initial_capacity, growth_factor, max_size)

    Returns:
        The newly installed TigerString
    """
    global _current
    _current = TigerString(**config)
    return _current


def current() -> TigerString:
    """Return the installed TigerString

    Raises:
        NotInitializedError: If initialize() has not been called
    """
    if _current is None:
        raise NotInitializedError("tiger string accumulator used before initialize()")
    return _current


def append_text(data: BytesLike, count: Optional[int] = None) -> int:
    """Append to the current buffer, see TigerString.append"""
    return current().append(data, count)


def current_contents() -> memoryview:
    """Read-only view of everything appended since initialize()

    The view is only valid until the next append that reallocates.
    """
    return current().contents()


def reset() -> None:
    """Release the current buffer and leave the accumulator uninitialized"""
    global _current
    if _current is not None:
        _current.close()
        _current = None


def run(data=None, out=None, chunk_size=4096):
    """Echo ``data`` through the accumulator, printing every buffer event on the way

    Input is read as bytes when ``data`` has a binary ``buffer`` underneath,
    and the accumulated bytes are written unchanged to ``out.buffer``. Only a
    text stream without one gets the contents decoded as UTF-8.

    Args:
        data: Stream to read from (default: sys.stdin)
        out: Text stream for event lines and the contents (default: sys.stdout)
        chunk_size: Bytes requested per read (default: 4096)
    """
    data = data if data is not None else sys.stdin
    out = out if out is not None else sys.stdout
    data = getattr(data, "buffer", data)

    def _catch_all(event_name, *args):
        print(f"\t{event_name} : {args}", file=out)

    try:
        initialize().add_catch_all_listener(_catch_all)
        chunk = data.read(chunk_size)
        while chunk:
            append_text(chunk)
            chunk = data.read(chunk_size)
    except AllocationError as e:
        print(f"tigerstring: {e}", file=sys.stderr)
        sys.exit(1)

    sink = getattr(out, "buffer", None)
    if sink is None:
        out.write(str(current()))
        return
    out.flush()
    sink.write(current_contents())
    sink.flush()
