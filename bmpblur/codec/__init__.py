from .bitmap import BitmapCodec, decode, encode, pad_row, row_stride
from .errors import (
    BadDimensions,
    BadMagic,
    FormatError,
    OpenFailed,
    SaveFailed,
    Truncated,
    UnsupportedCompression,
    UnsupportedDepth,
)
from .headers import FileHeader, HEADER_SIZE, InfoHeader

__all__ = [
    "BadDimensions",
    "BadMagic",
    "BitmapCodec",
    "decode",
    "encode",
    "FileHeader",
    "FormatError",
    "HEADER_SIZE",
    "InfoHeader",
    "OpenFailed",
    "pad_row",
    "row_stride",
    "SaveFailed",
    "Truncated",
    "UnsupportedCompression",
    "UnsupportedDepth",
]
