from __future__ import annotations

from ..types import Raster


class RasterFilter:
    def apply(self, raster: Raster) -> Raster:
        raise NotImplementedError
