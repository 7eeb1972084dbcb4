import pytest

from sahnekit.ssd import SSD, InvalidBlockId, InvalidBufferSize, SsdError


def test_fresh_blocks_are_zero():
    ssd = SSD(4096, 512)
    assert ssd.read_block(0) == bytes(512)
    assert ssd.read_block(ssd.block_count - 1) == bytes(512)


def test_block_count_from_size():
    ssd = SSD(4096, 512)
    assert ssd.block_count == 4096 // 512
    assert ssd.size == 4096
    assert ssd.block_size == 512


def test_write_read_round_trip():
    ssd = SSD(2048, 512)
    data = bytes(range(256)) * 2
    ssd.write_block(2, data)
    assert ssd.read_block(2) == data
    assert ssd.read_block(1) == bytes(512)


def test_read_returns_copy():
    ssd = SSD(1024, 512)
    data = b"\x07" * 512
    ssd.write_block(0, data)
    first = ssd.read_block(0)
    ssd.write_block(0, bytes(512))
    assert first == data


@pytest.mark.parametrize("block_id", [-1, 2, 50])
def test_invalid_block_id(block_id):
    ssd = SSD(1024, 512)
    with pytest.raises(InvalidBlockId):
        ssd.read_block(block_id)
    with pytest.raises(InvalidBlockId):
        ssd.write_block(block_id, bytes(512))


@pytest.mark.parametrize("length", [0, 511, 513])
def test_invalid_buffer_size(length):
    ssd = SSD(1024, 512)
    with pytest.raises(InvalidBufferSize):
        ssd.write_block(0, bytes(length))
    assert ssd.read_block(0) == bytes(512)


def test_errors_share_base():
    ssd = SSD(512, 512)
    with pytest.raises(SsdError):
        ssd.read_block(1)


def test_zero_block_size_rejected():
    with pytest.raises(ValueError):
        SSD(1024, 0)