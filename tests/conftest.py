import random
from typing import Callable, List, Optional

import pytest

from bmpblur.codec import FileHeader, InfoHeader, row_stride
from bmpblur.codec.headers import HEADER_SIZE, INFO_HEADER_SIZE
from bmpblur.types import Raster


def random_raster(width: int, height: int, seed: int = 0) -> Raster:
    rng = random.Random(seed)
    return Raster(width, height, bytes(rng.randrange(256) for _ in range(width * height * 3)))


def build_bmp(
    width: int,
    height: int,
    rows: List[bytes],
    bits: int = 24,
    compression: int = 0,
    gap: bytes = b"",
    padding_byte: int = 0,
    magic: bytes = b"BM",
    stride: Optional[int] = None,
) -> bytes:
    """Assemble a bitmap file by hand, rows written exactly as given."""
    if stride is None:
        stride = row_stride(width)
    body = b"".join(row + bytes([padding_byte]) * (stride - len(row)) for row in rows)
    offset = HEADER_SIZE + len(gap)
    file_header = FileHeader(magic, offset + len(body), 0, 0, offset)
    info = InfoHeader(INFO_HEADER_SIZE, width, height, 1, bits, compression, len(body), 2835, 2835, 0, 0)
    return file_header.pack() + info.pack() + gap + body


@pytest.fixture
def make_raster() -> Callable[..., Raster]:
    return random_raster


@pytest.fixture
def make_bmp() -> Callable[..., bytes]:
    return build_bmp
