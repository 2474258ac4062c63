import io

import pytest

from wirefdf.textutil import LineReader, atoi, split_words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("+7", 7),
        ("\t\n\v\f\r 13", 13),
        ("abc", 0),
        ("--5", 0),
        ("", 0),
        ("10\n", 10),
        ("- 3", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize(
    "text, sep, expected",
    [
        ("a  b c", " ", ["a", "b", "c"]),
        ("", " ", []),
        ("   ", " ", []),
        ("0,0xFF", ",", ["0", "0xFF"]),
        ("5,", ",", ["5"]),
        (" 1 2 3\n", " ", ["1", "2", "3\n"]),
    ],
)
def test_split_words(text, sep, expected):
    assert split_words(text, sep) == expected


def _reader_for(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_empty_file(tmp_path):
    path = _reader_for(tmp_path, "temp_empty.txt", "")
    with path.open(encoding="utf-8") as fh:
        assert LineReader(fh).read_line() is None


def test_single_line(tmp_path):
    path = _reader_for(tmp_path, "temp_single.txt", "Una sola línea")
    with path.open(encoding="utf-8") as fh:
        reader = LineReader(fh)
        assert reader.read_line() == "Una sola línea"
        assert reader.read_line() is None


def test_empty_lines(tmp_path):
    path = _reader_for(tmp_path, "temp_empty_lines.txt", "Línea 1\n\nLínea 3\n\n")
    with path.open(encoding="utf-8") as fh:
        assert list(LineReader(fh)) == ["Línea 1\n", "\n", "Línea 3\n", "\n"]


def test_multiple_readers(tmp_path):
    path1 = _reader_for(tmp_path, "temp_fd1.txt", "Archivo 1\nLínea 2\n")
    path2 = _reader_for(tmp_path, "temp_fd2.txt", "Archivo 2\nLínea 2\nLínea 3\n")
    with path1.open(encoding="utf-8") as fh1, path2.open(encoding="utf-8") as fh2:
        reader1 = LineReader(fh1)
        reader2 = LineReader(fh2)
        assert reader1.read_line() == "Archivo 1\n"
        assert reader2.read_line() == "Archivo 2\n"
        assert reader1.read_line() == "Línea 2\n"
        assert reader2.read_line() == "Línea 2\n"


def test_unreadable_stream_gives_nothing():
    stream = io.StringIO("data\n")
    stream.close()
    assert LineReader(stream).read_line() is None


def test_large_file(tmp_path):
    content = "".join(f"Línea {i} del archivo grande\n" for i in range(1000))
    path = _reader_for(tmp_path, "temp_large.txt", content)
    with path.open(encoding="utf-8") as fh:
        lines = list(LineReader(fh))
    assert len(lines) == 1000
    assert lines[999] == "Línea 999 del archivo grande\n"


@pytest.mark.parametrize("limit", [3, 5])
def test_first_lines_of_map(tmp_path, limit):
    rows = [" ".join(["0"] * 4) + "\n" for _ in range(8)]
    rows[2] = "0 10 10 0\n"
    path = _reader_for(tmp_path, "42.fdf", "".join(rows))
    with path.open(encoding="utf-8") as fh:
        reader = LineReader(fh)
        first = [reader.read_line() for _ in range(limit)]
    assert first == rows[:limit]


@pytest.mark.parametrize("size", [1, 2, 3, 42, 1000])
def test_lines_join_back_to_input(size):
    text = "alpha\nbeta\n\ngamma delta\nlast without newline"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])


def test_binary_stream():
    lines = list(LineReader(io.BytesIO(b"1 2\n3 4\n"), 3))
    assert lines == [b"1 2\n", b"3 4\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)