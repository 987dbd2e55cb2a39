from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class Canvas:
    """
    Simple data object: RGB pixels the rasterizer paints on.
    No Pillow logic outside the canvas repository.
    """
    pixels: np.ndarray # Shape (H, W, 3), dtype uint8, RGB order.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]
