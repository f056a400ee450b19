from __future__ import annotations

from PIL import Image, ImageOps

from .types import Raster


def raster_to_image(raster: Raster, bottom_up: bool = False) -> Image.Image:
    """Build an RGB Pillow image from BGR raster bytes.

    Set bottom_up when the raster rows are in the on-disk order of a
    positive-height bitmap, so the image comes out the right way up.
    """
    raster.validate()
    img = Image.frombytes("RGB", (raster.width, raster.height), raster.pixels, "raw", "BGR")
    if bottom_up:
        img = ImageOps.flip(img)
    return img


def image_to_raster(img: Image.Image) -> Raster:
    if img.mode != "RGB":
        img = img.convert("RGB")
    width, height = img.size
    raster = Raster(width, height, img.tobytes("raw", "BGR"))
    raster.validate()
    return raster
