import pytest

from sahnekit.ruby import parse_ruby_lines, read_ruby_file


def test_read_and_parse_ruby_file(tmp_path):
    path = tmp_path / "test_optimized.rb"
    path.write_text("puts 'Merhaba, Dünya!'\n  x = 10\n  puts x", encoding="utf-8")

    lines = read_ruby_file(path)
    parsed = parse_ruby_lines(lines)

    assert parsed == ["puts", "'Merhaba,", "Dünya!'", "x", "=", "10", "puts", "x"]


def test_read_strips_line_endings(tmp_path):
    path = tmp_path / "crlf.rb"
    path.write_bytes(b"a = 1\r\nb = 2\n")
    assert read_ruby_file(path) == ["a = 1", "b = 2"]


def test_read_keeps_blank_lines(tmp_path):
    path = tmp_path / "blank.rb"
    path.write_text("x\n\ny\n", encoding="utf-8")
    assert read_ruby_file(path) == ["x", "", "y"]


def test_parse_empty_lines():
    assert parse_ruby_lines(["", "   "]) == []


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ruby_file(tmp_path / "none.rb")