import pytest

from sahnekit.typescript import (
    MAX_SIZE,
    TypeScriptFile,
    main,
    process_typescript_file,
)

CODE = "let x = 1;\nlet y = 2;\n"


@pytest.fixture
def ts_path(tmp_path):
    path = tmp_path / "example.ts"
    path.write_text(CODE, encoding="utf-8")
    return path


def test_from_file_reads_content(ts_path):
    ts_file = TypeScriptFile.from_file(str(ts_path))
    assert ts_file.content == CODE
    assert ts_file.path == str(ts_path)


def test_analyze_counts(ts_path):
    analysis = TypeScriptFile.from_file(str(ts_path)).analyze()
    assert analysis.line_count == 2
    assert analysis.char_count == len(CODE)


def test_trailing_newline_does_not_add_line():
    with_newline = TypeScriptFile("a.ts", CODE).analyze()
    without = TypeScriptFile("a.ts", CODE.rstrip("\n")).analyze()
    assert with_newline.line_count == without.line_count


def test_empty_content_has_no_lines():
    assert TypeScriptFile("e.ts", "").analyze().line_count == TypeScriptFile("e.ts", "").analyze().char_count


def test_parse_rejects_large_file():
    big = TypeScriptFile("big.ts", "a" * (MAX_SIZE + 1))
    with pytest.raises(ValueError, match="big.ts"):
        big.parse()


def test_parse_accepts_limit():
    TypeScriptFile("ok.ts", "a" * MAX_SIZE).parse()
    assert TypeScriptFile("ok.ts", "a" * MAX_SIZE).analyze().char_count == MAX_SIZE


def test_process_reports(ts_path, capsys):
    analysis = process_typescript_file(str(ts_path))
    out = capsys.readouterr().out
    assert f"lines: {analysis.line_count}" in out


def test_main_success(ts_path):
    assert main([str(ts_path)]) == 0


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.ts")]) == 1
    assert "error" in capsys.readouterr().err