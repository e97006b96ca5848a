"""
Byte-level I/O collaborators for the interpreter.

The interpreter only knows two operations: ``ByteSource.read()`` for ``,`` and
``ByteSink.write()`` for ``.``. Both are @runtime_checkable Protocols so
embedding applications and tests can inject their own implementations.

End of input is signalled by the EOF sentinel (-1), which lies outside the
byte range on purpose: the interpreter forwards it unchanged to the cell, and
the value overflow policy decides what it becomes.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, TextIO, runtime_checkable

EOF: int = -1


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for program input: one integer per ``,`` instruction."""

    def read(self) -> int: ...


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for program output: one byte per ``.`` instruction."""

    def write(self, value: int) -> None: ...


# ── Stream adapters ────────────────────────────────────────────────────────────


class StreamSource:
    """Reads one byte at a time from a binary stream such as ``sys.stdin.buffer``."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self) -> int:
        chunk = self._stream.read(1)
        if not chunk:
            return EOF
        return chunk[0]


class TextStreamSource:
    """Reads from a text stream such as ``sys.stdin`` and serves its UTF-8 bytes.

    Used when the text layer may already hold buffered input, e.g. after the
    program line was read from the same stream with ``readline()``.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = b""

    def read(self) -> int:
        if not self._pending:
            char = self._stream.read(1)
            if not char:
                return EOF
            self._pending = char.encode("utf-8")
        value = self._pending[0]
        self._pending = self._pending[1:]
        return value


class StreamSink:
    """Writes one byte at a time to a binary stream such as ``sys.stdout.buffer``.

    Attributes:
        flush: Flush the stream after every byte, so interactive programs
            show output before blocking on input.
    """

    def __init__(self, stream: BinaryIO, flush: bool = True) -> None:
        self._stream = stream
        self.flush = flush

    def write(self, value: int) -> None:
        self._stream.write(bytes((value,)))
        if self.flush:
            self._stream.flush()


# ── In-memory adapters ─────────────────────────────────────────────────────────


class BufferSource:
    """Serves bytes from memory, then EOF forever. Strings are UTF-8 encoded."""

    def __init__(self, data: bytes | str = b"") -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = bytes(data)
        self._pos = 0

    def read(self) -> int:
        if self._pos >= len(self._data):
            return EOF
        value = self._data[self._pos]
        self._pos += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos


class BufferSink:
    """Collects written bytes in memory."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, value: int) -> None:
        self._buffer.append(value)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def text(self, encoding: str = "latin-1") -> str:
        """Decode the collected bytes; latin-1 maps every byte to one character."""
        return self._buffer.decode(encoding)
