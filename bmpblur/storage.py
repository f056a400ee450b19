from __future__ import annotations

from .codec import OpenFailed, SaveFailed, decode, encode
from .types import Raster


def read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise OpenFailed(f"Unable to open file {path}: {exc.strerror or exc}") from exc


def load_bitmap(path: str) -> Raster:
    """Read and decode a 24-bit BMP file."""
    return decode(read_bytes(path))


def save_bitmap(path: str, raster: Raster) -> None:
    """Encode a raster and write it, replacing any existing file."""
    data = encode(raster)
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise SaveFailed(f"Unable to create file {path}: {exc.strerror or exc}") from exc
