from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import Truncated

BMP_MAGIC = b"BM"
FILE_HEADER_FORMAT = "<2sIHHI"
INFO_HEADER_FORMAT = "<IiiHHIIiiII"
FILE_HEADER_SIZE = struct.calcsize(FILE_HEADER_FORMAT)
INFO_HEADER_SIZE = struct.calcsize(INFO_HEADER_FORMAT)
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE


@dataclass(frozen=True)
class FileHeader:
    magic: bytes
    file_size: int
    reserved1: int
    reserved2: int
    pixel_offset: int

    def pack(self) -> bytes:
        return struct.pack(
            FILE_HEADER_FORMAT,
            self.magic,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.pixel_offset,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "FileHeader":
        if len(data) < FILE_HEADER_SIZE:
            raise Truncated(f"File header needs {FILE_HEADER_SIZE} bytes, got {len(data)}")
        return cls(*struct.unpack_from(FILE_HEADER_FORMAT, data, 0))


@dataclass(frozen=True)
class InfoHeader:
    """BITMAPINFOHEADER; a negative height marks a top-down file."""

    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_resolution: int
    y_resolution: int
    palette_colors: int
    important_colors: int

    def pack(self) -> bytes:
        return struct.pack(
            INFO_HEADER_FORMAT,
            self.header_size,
            self.width,
            self.height,
            self.planes,
            self.bits_per_pixel,
            self.compression,
            self.image_size,
            self.x_resolution,
            self.y_resolution,
            self.palette_colors,
            self.important_colors,
        )

    @classmethod
    def unpack(cls, data: bytes, offset: int = FILE_HEADER_SIZE) -> "InfoHeader":
        if len(data) < offset + INFO_HEADER_SIZE:
            raise Truncated(f"Info header needs {INFO_HEADER_SIZE} bytes at offset {offset}")
        return cls(*struct.unpack_from(INFO_HEADER_FORMAT, data, offset))

    @property
    def top_down(self) -> bool:
        return self.height < 0
