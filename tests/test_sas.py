import pytest

from sahnekit.sas import (
    OpenError,
    ReadError,
    SasDevice,
    SasDeviceError,
    SeekError,
)


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "sas.img"
    path.write_bytes(bytes(64))
    return path


def test_missing_image_raises_open_error(tmp_path):
    with pytest.raises(OpenError):
        SasDevice(tmp_path / "absent.img", 512)


def test_round_trip(image):
    with SasDevice(image, 16) as dev:
        dev.write_block(1, b"sixteen bytes!!!")
        assert dev.read_block(1) == b"sixteen bytes!!!"


def test_write_goes_to_block_offset(image):
    with SasDevice(image, 16) as dev:
        dev.write_block(2, b"abc")
    content = image.read_bytes()
    assert content[32:35] == b"abc"
    assert len(content) == 64


def test_read_with_explicit_length(image):
    with SasDevice(image, 16) as dev:
        dev.write_block(0, b"hello")
        assert dev.read_block(0, 5) == b"hello"


def test_read_past_end_raises(image):
    with SasDevice(image, 16) as dev:
        with pytest.raises(ReadError):
            dev.read_block(4)


def test_negative_block_raises_seek_error(image):
    with SasDevice(image, 16) as dev:
        with pytest.raises(SeekError):
            dev.read_block(-1)


def test_errors_share_a_base(image):
    with SasDevice(image, 16) as dev:
        with pytest.raises(SasDeviceError):
            dev.read_block(100)