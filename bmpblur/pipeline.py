from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec import InfoHeader, SaveFailed, decode
from .filters import BoxBlurFilter, RasterFilter
from .rendering import raster_to_image
from .storage import read_bytes, save_bitmap
from .types import Raster

DEFAULT_INPUT_PATH = "socks.bmp"
DEFAULT_OUTPUT_PATH = "output.bmp"


@dataclass
class BlurSettings:
    input_path: str = DEFAULT_INPUT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    rewrite_input: bool = True
    preview_path: Optional[str] = None


@dataclass(frozen=True)
class BlurResult:
    original: Raster
    blurred: Raster


class BlurJob:
    def __init__(self, settings: Optional[BlurSettings] = None, raster_filter: Optional[RasterFilter] = None) -> None:
        self.settings = settings or BlurSettings()
        self.raster_filter = raster_filter or BoxBlurFilter()

    def run(self) -> BlurResult:
        """Decode the input, blur it and write the outputs.

        Nothing is written if the input fails to decode. The original raster
        is re-encoded over the input path before the blurred output is saved.
        """
        data = read_bytes(self.settings.input_path)
        original = decode(data)
        blurred = self.raster_filter.apply(original)
        if self.settings.rewrite_input:
            save_bitmap(self.settings.input_path, original)
        save_bitmap(self.settings.output_path, blurred)
        if self.settings.preview_path:
            self._save_preview(blurred, bottom_up=not InfoHeader.unpack(data).top_down)
        return BlurResult(original, blurred)

    def _save_preview(self, raster: Raster, bottom_up: bool) -> None:
        img = raster_to_image(raster, bottom_up=bottom_up)
        try:
            img.save(self.settings.preview_path)
        except (OSError, ValueError) as exc:
            raise SaveFailed(f"Unable to save preview {self.settings.preview_path}: {exc}") from exc
