from .base import RasterFilter
from .box_blur import BoxBlurFilter, box_blur

__all__ = ["BoxBlurFilter", "RasterFilter", "box_blur"]
