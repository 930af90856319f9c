import os

import pytest

from ftkit.lines import BUFFER_SIZE, LineReader


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.mark.parametrize("size", [1, 2, 3, BUFFER_SIZE, 1000])
def test_lines_keep_their_newlines(make_fd, size):
    fd = make_fd(b"one\ntwo\nthree\n")
    reader = LineReader(fd, size)
    assert list(reader) == [b"one\n", b"two\n", b"three\n"]


@pytest.mark.parametrize("size", [1, 5, BUFFER_SIZE])
def test_last_line_without_newline(make_fd, size):
    fd = make_fd(b"alpha\nbeta")
    reader = LineReader(fd, size)
    assert reader.read_line() == b"alpha\n"
    assert reader.read_line() == b"beta"
    assert reader.read_line() is None


def test_empty_input_gives_none(make_fd):
    reader = LineReader(make_fd(b""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines(make_fd):
    reader = LineReader(make_fd(b"\n\nx\n"), 4)
    assert list(reader) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 7, 64])
def test_joined_lines_rebuild_input(make_fd, size):
    data = b"".join(b"line %d with some text\n" % n for n in range(50)) + b"tail"
    lines = list(LineReader(make_fd(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert len(lines) == 51


def test_default_buffer_size(make_fd):
    reader = LineReader(make_fd(b"a\n"))
    assert reader.buffer_size == 42


def test_pipe_input():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"first\nsecond\n")
        os.close(write_end)
        reader = LineReader(read_end, 3)
        assert list(reader) == [b"first\n", b"second\n"]
    finally:
        os.close(read_end)


def test_data_after_end_is_followed():
    read_end, write_end = os.pipe()
    try:
        reader = LineReader(read_end, 4)
        os.write(write_end, b"partial")
        write_dup = os.dup(write_end)
        os.close(write_end)
        os.write(write_dup, b"")
        os.close(write_dup)
        assert reader.read_line() == b"partial"
        assert reader.read_line() is None
    finally:
        os.close(read_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_rejected(make_fd, size):
    with pytest.raises(ValueError):
        LineReader(make_fd(b"x\n"), size)


def test_closed_descriptor_raises(make_fd):
    fd = make_fd(b"data\n")
    reader = LineReader(fd)
    os.close(fd)
    with pytest.raises(OSError):
        reader.read_line()