import io
import zipfile

import pytest

from sahnekit.vsdx import VsdxFile


def _zip(members):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in members:
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def package():
    return _zip(
        [
            ("[Content_Types].xml", b"<Types>first part</Types>"),
            ("visio/document.xml", b"<VisioDocument/>"),
        ]
    )


def test_first_file_content_is_cached(package):
    vsdx = VsdxFile(package)
    assert vsdx.first_file_content == b"<Types>first part</Types>"


def test_get_file_returns_member(package):
    vsdx = VsdxFile(package)
    assert vsdx.get_file("visio/document.xml") == b"<VisioDocument/>"


def test_get_file_missing_raises_key_error(package):
    vsdx = VsdxFile(package)
    with pytest.raises(KeyError):
        vsdx.get_file("missing.xml")


def test_read_slices_first_member(package):
    vsdx = VsdxFile(package)
    assert vsdx.read(0, 7) == b"<Types>"
    assert vsdx.read(7, 5) == b"first"


def test_read_clamps_to_content_length(package):
    vsdx = VsdxFile(package)
    content = vsdx.first_file_content
    assert vsdx.read(7, 10_000) == content[7:]


def test_read_past_end_gives_nothing(package):
    vsdx = VsdxFile(package)
    assert vsdx.read(len(vsdx.first_file_content), 4) == b""
    assert vsdx.read(10_000, 4) == b""


def test_read_negative_offset_rejected(package):
    vsdx = VsdxFile(package)
    with pytest.raises(ValueError):
        vsdx.read(-1, 4)


def test_empty_archive_has_no_content():
    vsdx = VsdxFile(_zip([]))
    assert vsdx.first_file_content is None
    with pytest.raises(OSError):
        vsdx.read(0, 4)


def test_write_is_unsupported(package):
    vsdx = VsdxFile(package)
    with pytest.raises(io.UnsupportedOperation):
        vsdx.write(0, b"data")


def test_accepts_file_like_object(package):
    with VsdxFile(io.BytesIO(package)) as vsdx:
        assert vsdx.get_file("[Content_Types].xml") == b"<Types>first part</Types>"


def test_invalid_zip_rejected():
    with pytest.raises(zipfile.BadZipFile):
        VsdxFile(b"not a zip archive at all")