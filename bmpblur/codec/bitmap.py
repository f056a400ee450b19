from __future__ import annotations

from typing import List

from ..types import BYTES_PER_PIXEL, Raster
from .errors import BadDimensions, BadMagic, Truncated, UnsupportedCompression, UnsupportedDepth
from .headers import BMP_MAGIC, HEADER_SIZE, INFO_HEADER_SIZE, FileHeader, InfoHeader

SUPPORTED_BITS_PER_PIXEL = 24
BI_RGB = 0


def row_stride(width: int) -> int:
    """Return the on-disk row size: width * 3 rounded up to a multiple of 4."""
    return (width * BYTES_PER_PIXEL + 3) & ~3


def pad_row(row: bytes, stride: int) -> bytes:
    """Pad a packed pixel row with zero bytes up to the stride."""
    if len(row) > stride:
        raise ValueError("Row is longer than the stride")
    return row + bytes(stride - len(row))


class BitmapCodec:
    """Uncompressed 24-bit BMP reader and writer."""

    def decode(self, data: bytes) -> Raster:
        if len(data) < HEADER_SIZE:
            raise Truncated(f"Bitmap needs at least {HEADER_SIZE} header bytes, got {len(data)}")
        file_header = FileHeader.unpack(data)
        if file_header.magic != BMP_MAGIC:
            raise BadMagic(f"Not a BMP file (magic {file_header.magic!r})")
        info = InfoHeader.unpack(data)
        if info.bits_per_pixel != SUPPORTED_BITS_PER_PIXEL:
            raise UnsupportedDepth(f"Only 24-bit BMPs are supported, got {info.bits_per_pixel}-bit")
        if info.compression != BI_RGB:
            raise UnsupportedCompression(f"Compressed BMPs are not supported (compression {info.compression})")
        if info.width <= 0 or info.height == 0:
            raise BadDimensions(f"Invalid bitmap dimensions {info.width}x{info.height}")

        width = info.width
        height = abs(info.height)
        stride = row_stride(width)
        offset = file_header.pixel_offset
        available = len(data) - offset
        if available < stride * height:
            raise Truncated(
                f"Pixel data needs {stride * height} bytes at offset {offset}, got {max(0, available)}"
            )
        packed = width * BYTES_PER_PIXEL
        rows: List[bytes] = []
        # Rows stay in file order; bottom-up files are not flipped.
        for y in range(height):
            start = offset + y * stride
            rows.append(data[start : start + packed])
        return Raster(width, height, b"".join(rows))

    def encode(self, raster: Raster) -> bytes:
        raster.validate()
        stride = row_stride(raster.width)
        image_size = stride * raster.height
        file_header = FileHeader(
            magic=BMP_MAGIC,
            file_size=HEADER_SIZE + image_size,
            reserved1=0,
            reserved2=0,
            pixel_offset=HEADER_SIZE,
        )
        info = InfoHeader(
            header_size=INFO_HEADER_SIZE,
            width=raster.width,
            height=raster.height,
            planes=1,
            bits_per_pixel=SUPPORTED_BITS_PER_PIXEL,
            compression=BI_RGB,
            image_size=image_size,
            x_resolution=0,
            y_resolution=0,
            palette_colors=0,
            important_colors=0,
        )
        out = bytearray()
        out += file_header.pack()
        out += info.pack()
        for y in range(raster.height):
            out += pad_row(raster.row(y), stride)
        return bytes(out)


def decode(data: bytes) -> Raster:
    return BitmapCodec().decode(data)


def encode(raster: Raster) -> bytes:
    return BitmapCodec().encode(raster)
