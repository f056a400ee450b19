from .codec import BitmapCodec, FormatError, decode, encode
from .filters import BoxBlurFilter, box_blur
from .pipeline import BlurJob, BlurSettings
from .storage import load_bitmap, save_bitmap
from .types import Raster

__all__ = [
    "BitmapCodec",
    "BlurJob",
    "BlurSettings",
    "box_blur",
    "BoxBlurFilter",
    "decode",
    "encode",
    "FormatError",
    "load_bitmap",
    "Raster",
    "save_bitmap",
]
