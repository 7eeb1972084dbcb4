import pytest

from sahnekit.hdd import HDD, BlockDeviceError, BlockSizeError


def test_zero_block_size_is_rejected(tmp_path):
    with pytest.raises(BlockSizeError):
        HDD(tmp_path / "disk.img", 0)


def test_image_file_is_created(tmp_path):
    path = tmp_path / "disk.img"
    with HDD(path, 16):
        pass
    assert path.exists()
    assert path.read_bytes() == b""


def test_write_then_read_round_trip(tmp_path):
    with HDD(tmp_path / "disk.img", 8) as hdd:
        hdd.write_block(0, b"ABCDEFGH")
        hdd.write_block(1, b"12345678")
        assert hdd.read_block(1) == b"12345678"
        assert hdd.read_block(0) == b"ABCDEFGH"


def test_block_lands_at_its_offset(tmp_path):
    path = tmp_path / "disk.img"
    with HDD(path, 4) as hdd:
        hdd.write_block(2, b"wxyz")
    content = path.read_bytes()
    assert content[8:12] == b"wxyz"
    assert content[:8] == bytes(8)


def test_wrong_buffer_size_raises(tmp_path):
    with HDD(tmp_path / "disk.img", 8) as hdd:
        with pytest.raises(BlockSizeError):
            hdd.write_block(0, b"short")


def test_read_past_end_raises(tmp_path):
    with HDD(tmp_path / "disk.img", 8) as hdd:
        hdd.write_block(0, b"ABCDEFGH")
        with pytest.raises(BlockDeviceError):
            hdd.read_block(1)


def test_existing_content_is_kept_on_reopen(tmp_path):
    path = tmp_path / "disk.img"
    with HDD(path, 4) as hdd:
        hdd.write_block(0, b"keep")
    with HDD(path, 4) as hdd:
        assert hdd.read_block(0) == b"keep"


def test_block_size_errors_are_caught_as_block_device_errors(tmp_path):
    with pytest.raises(BlockDeviceError):
        HDD(tmp_path / "zero.img", 0)
    with HDD(tmp_path / "disk.img", 4) as hdd:
        with pytest.raises(BlockDeviceError):
            hdd.write_block(0, b"toolong")