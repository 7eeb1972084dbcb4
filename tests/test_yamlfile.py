import pytest

from sahnekit.yamlfile import YamlFile, YamlFileError

DOCUMENT = """\
name: demo
count: 7
ratio: 0.5
enabled: true
tags:
  - a
  - b
"""


@pytest.fixture
def loaded(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(DOCUMENT, encoding="utf-8")
    return YamlFile.load_from_file(path)


def test_get_string(loaded):
    assert loaded.get_value("name", str) == "demo"


def test_get_integer(loaded):
    assert loaded.get_value("count", int) == 7


def test_get_float_from_float_and_int(loaded):
    assert loaded.get_value("ratio", float) == 0.5
    assert loaded.get_value("count", float) == 7.0


def test_get_bool_and_list(loaded):
    assert loaded.get_value("enabled", bool) is True
    assert loaded.get_value("tags", list) == ["a", "b"]


def test_wrong_type_gives_none(loaded):
    assert loaded.get_value("name", int) is None
    assert loaded.get_value("enabled", int) is None


def test_missing_key_gives_none(loaded):
    assert loaded.get_value("absent", str) is None


def test_non_mapping_document(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    doc = YamlFile.load_from_file(path)
    assert doc.data == ["one", "two"]
    assert doc.get_value("one", str) is None


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")
    with pytest.raises(YamlFileError):
        YamlFile.load_from_file(path)


def test_invalid_utf8(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_bytes(b"key: \xff\xfe\n")
    with pytest.raises(YamlFileError):
        YamlFile.load_from_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlFile.load_from_file(tmp_path / "absent.yaml")