import io

import pytest

from pipex.lines import BUFFER_SIZE, LineReader, get_next_line

TEXT = "first line\nsecond\n\nlast without newline"


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.BytesIO(data)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


@pytest.mark.parametrize("size", [1, 3, BUFFER_SIZE, 1000])
def test_text_lines_round_trip(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, 1000])
def test_bytes_lines_round_trip(size):
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])


def test_empty_stream_gives_none_repeatedly():
    reader = LineReader(io.StringIO(""))
    assert reader.readline() is None
    assert reader.readline() is None


def test_none_after_last_line():
    reader = LineReader(io.StringIO("only\n"), 2)
    assert reader.readline() == "only\n"
    assert reader.readline() is None


def test_reads_use_buffer_size():
    stream = _RecordingStream(b"abc\ndef\n")
    reader = LineReader(stream, 3)
    assert reader.readline() == b"abc\n"
    assert set(stream.sizes) == {3}


def test_non_positive_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).readline()


def test_get_next_line_keeps_state_per_stream():
    a = io.StringIO("a1\na2\n")
    b = io.StringIO("b1\nb2")
    assert get_next_line(a) == "a1\n"
    assert get_next_line(b) == "b1\n"
    assert get_next_line(a) == "a2\n"
    assert get_next_line(b) == "b2"
    assert get_next_line(a) is None
    assert get_next_line(b) is None


def test_get_next_line_none_stream():
    assert get_next_line(None) is None


def test_get_next_line_error_propagates():
    with pytest.raises(OSError):
        get_next_line(_FailingStream())