import pytest

from bmpblur.types import Raster


def test_blank_fills_every_pixel() -> None:
    raster = Raster.blank(2, 3, (1, 2, 3))
    assert raster.pixels == bytes([1, 2, 3]) * 6
    assert raster.pixel(1, 2) == (1, 2, 3)


def test_row_and_pixel_are_top_down_row_major() -> None:
    raster = Raster(2, 2, bytes(range(12)))
    assert raster.stride == 6
    assert raster.row(1) == bytes(range(6, 12))
    assert raster.pixel(1, 0) == (3, 4, 5)
    assert raster.pixel(0, 1) == (6, 7, 8)


@pytest.mark.parametrize(
    "width,height,size",
    [(0, 1, 0), (1, 0, 0), (-1, 2, 6), (2, 2, 11), (2, 2, 13)],
)
def test_validate_rejects_mismatched_buffers(width: int, height: int, size: int) -> None:
    with pytest.raises(ValueError):
        Raster(width, height, bytes(size)).validate()


def test_pixel_out_of_bounds() -> None:
    raster = Raster.blank(2, 2)
    with pytest.raises(IndexError):
        raster.pixel(2, 0)
