"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr

BUFFER_SIZE = 42


def _newline(data: Any) -> Any:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader:
    """Yield the lines of ``stream``, each with its newline, reading ``buffer_size`` at a time.

    ``stream`` is any object with ``read(size)`` returning ``str`` or bytes;
    an empty result marks its end.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Any = None

    def _fill(self, pending: Any) -> Any:
        chunks = [] if pending is None else [pending]
        while True:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            if _newline(chunk) in chunk:
                break
        if not chunks:
            return None
        return chunks[0][:0].join(chunks)

    def readline(self) -> AnyStr | None:
        """The next line, newline included, or ``None`` once the stream is exhausted.

        A read error discards whatever was buffered and propagates.
        """
        pending = self._pending
        try:
            if pending is None or _newline(pending) not in pending:
                pending = self._fill(pending)
        except BaseException:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        index = pending.find(_newline(pending))
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[Any]:
        while (line := self.readline()) is not None:
            yield line


_readers: dict[Any, LineReader] = {}


def get_next_line(stream: Any) -> AnyStr | None:
    """The next line of ``stream``, keeping unread data between calls per stream.

    Returns ``None`` at the end of the stream, after which its state is dropped.
    """
    if stream is None:
        return None
    reader = _readers.get(stream)
    if reader is None:
        reader = _readers[stream] = LineReader(stream)
    try:
        line = reader.readline()
    except BaseException:
        _readers.pop(stream, None)
        raise
    if line is None:
        _readers.pop(stream, None)
    return line