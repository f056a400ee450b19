from __future__ import annotations

from ..types import BYTES_PER_PIXEL, Raster
from .base import RasterFilter


class BoxBlurFilter(RasterFilter):
    """3x3 mean filter that averages only the neighbours inside the image.

    Out-of-bounds neighbours are left out of both the sum and the count, so
    corners average 4 samples, edges 6 and interior pixels 9.
    """

    def apply(self, raster: Raster) -> Raster:
        raster.validate()
        width = raster.width
        height = raster.height
        src = raster.pixels
        out = bytearray(len(src))
        for y in range(height):
            y0 = max(0, y - 1)
            y1 = min(height - 1, y + 1)
            for x in range(width):
                x0 = max(0, x - 1)
                x1 = min(width - 1, x + 1)
                index = (y * width + x) * BYTES_PER_PIXEL
                out[index : index + BYTES_PER_PIXEL] = self._average(src, width, x0, x1, y0, y1)
        return Raster(width, height, bytes(out))

    @staticmethod
    def _average(src: bytes, width: int, x0: int, x1: int, y0: int, y1: int) -> bytes:
        sums = [0, 0, 0]
        count = 0
        for ny in range(y0, y1 + 1):
            for nx in range(x0, x1 + 1):
                index = (ny * width + nx) * BYTES_PER_PIXEL
                sums[0] += src[index]
                sums[1] += src[index + 1]
                sums[2] += src[index + 2]
                count += 1
        return bytes(total // count for total in sums)


def box_blur(raster: Raster) -> Raster:
    return BoxBlurFilter().apply(raster)
