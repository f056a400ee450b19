from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

BYTES_PER_PIXEL = 3


@dataclass(frozen=True)
class Raster:
    """Row-major BGR pixel buffer, rows top-to-bottom, no row padding."""

    width: int
    height: int
    pixels: bytes

    def validate(self) -> None:
        """Validate dimensions against the pixel buffer."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if self.height <= 0:
            raise ValueError("Height must be greater than zero")
        if len(self.pixels) != self.width * self.height * BYTES_PER_PIXEL:
            raise ValueError("Pixels length must equal width * height * 3")

    @property
    def stride(self) -> int:
        return self.width * BYTES_PER_PIXEL

    def row(self, y: int) -> bytes:
        start = y * self.stride
        return self.pixels[start : start + self.stride]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """Return the (blue, green, red) triple at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds")
        index = (y * self.width + x) * BYTES_PER_PIXEL
        b, g, r = self.pixels[index : index + BYTES_PER_PIXEL]
        return b, g, r

    @classmethod
    def blank(cls, width: int, height: int, color: Tuple[int, int, int] = (0, 0, 0)) -> "Raster":
        raster = cls(width, height, bytes(color) * (width * height))
        raster.validate()
        return raster
