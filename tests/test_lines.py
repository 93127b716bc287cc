import io
import os

import pytest

from farmrun.lines import LineReader

MAP_TEXT = "1111111\n1P0C0E1\n1111111\n"


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 42, 1000])
def test_lines_rejoin_to_input(buffer_size):
    reader = LineReader(io.BytesIO(MAP_TEXT.encode()), buffer_size=buffer_size)
    lines = list(reader)
    assert "".join(lines) == MAP_TEXT
    assert lines == MAP_TEXT.splitlines(keepends=True)


def test_each_line_ends_with_newline_except_last():
    text = "ab\ncd\nef"
    lines = list(LineReader(io.BytesIO(text.encode()), buffer_size=3))
    assert lines == text.splitlines(keepends=True)
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


def test_empty_source_gives_none():
    reader = LineReader(io.BytesIO(b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_none_after_exhaustion_repeats():
    reader = LineReader(io.BytesIO(b"x\n"))
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_preserved():
    text = "\n\nz\n"
    assert list(LineReader(io.BytesIO(text.encode()), buffer_size=1)) == [
        "\n",
        "\n",
        "z\n",
    ]


def test_reads_from_file_descriptor(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(MAP_TEXT)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd, buffer_size=4))
    finally:
        os.close(fd)
    assert lines == MAP_TEXT.splitlines(keepends=True)


def test_text_stream_accepted():
    lines = list(LineReader(io.StringIO(MAP_TEXT), buffer_size=3))
    assert "".join(lines) == MAP_TEXT


def test_multibyte_characters_across_chunks():
    text = "épée\nçà\n"
    lines = list(LineReader(io.BytesIO(text.encode("utf-8")), buffer_size=1))
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), buffer_size=size)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_read_error_raises(tmp_path):
    fd = os.open(tmp_path, os.O_RDONLY) if os.name != "nt" else None
    if fd is None:
        reader = LineReader(io.BytesIO(b"a\n"))
        assert reader.read_line() == "a\n"
        return
    try:
        with pytest.raises(OSError):
            LineReader(fd).read_line()
    finally:
        os.close(fd)