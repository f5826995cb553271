import io
import os

import pytest

from sigtalk.lines import LineReader


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1024])
def test_bytes_lines_round_trip(size):
    data = b"first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.BytesIO(data), buffer_size=size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, 100])
def test_text_stream(size):
    data = "alpha\nbeta\ngamma\n"
    lines = list(LineReader(io.StringIO(data), buffer_size=size))
    assert lines == data.splitlines(keepends=True)
    assert all(line.endswith("\n") for line in lines)


def test_empty_input_gives_none():
    reader = LineReader(io.BytesIO(b""))
    assert reader.readline() is None
    assert list(reader) == []


def test_none_after_exhaustion():
    reader = LineReader(io.BytesIO(b"only\n"), buffer_size=4)
    assert reader.readline() == b"only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_default_buffer_size():
    reader = LineReader(io.BytesIO(b"a\nb"))
    assert reader.readline() == b"a\n"
    assert reader.readline() == b"b"
    assert reader.readline() is None


def test_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        data = b"one\ntwo\nthree"
        os.write(write_fd, data)
        os.close(write_fd)
        lines = list(LineReader(read_fd, buffer_size=3))
        assert lines == data.splitlines(keepends=True)
    finally:
        os.close(read_fd)


def test_rejects_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size=0)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_read_error_propagates():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        LineReader(read_fd).readline()