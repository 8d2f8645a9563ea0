import pytest

from cubworld.framebuffer import FrameBuffer


def test_starts_black():
    fb = FrameBuffer(4, 3)
    assert all(fb.get_pixel(x, y) == 0 for x in range(4) for y in range(3))


def test_put_and_get_round_trip():
    fb = FrameBuffer(5, 5)
    fb.put_pixel(2, 3, 0x00FF8800)
    assert fb.get_pixel(2, 3) == 0x00FF8800
    assert fb.get_pixel(3, 2) == 0


def test_color_truncated_to_32_bits():
    fb = FrameBuffer(1, 1)
    fb.put_pixel(0, 0, 0x1_FFFFFFFF)
    assert fb.get_pixel(0, 0) == 0xFFFFFFFF


def test_fill():
    fb = FrameBuffer(3, 2)
    fb.fill(0x123456)
    assert {fb.get_pixel(x, y) for x in range(3) for y in range(2)} == {0x123456}


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, 2)])
def test_out_of_bounds(x, y):
    fb = FrameBuffer(3, 2)
    with pytest.raises(IndexError):
        fb.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        fb.get_pixel(x, y)


def test_bad_size():
    with pytest.raises(ValueError):
        FrameBuffer(0, 5)


def test_to_bytes_layout():
    fb = FrameBuffer(2, 1)
    fb.put_pixel(1, 0, 0x11223344)
    data = fb.to_bytes()
    assert len(data) == 8
    assert data[4:] == bytes([0x44, 0x33, 0x22, 0x11])
    assert data[:4] == bytes(4)