from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]          # (r, g, b), each 0-255
GridCell = Tuple[int, int]            # (value, index)
Point = Tuple[int, int]               # (x, y)
Rectangle = Tuple[Point, Point]       # (top_left, bottom_right)


@dataclass(frozen=True)
class Image:
    """
    Working state threaded through the identicon pipeline.
    Not a bitmap: each stage returns a copy with one more field populated.
    """
    digest: Tuple[int, ...]                          # MD5 bytes, 16 entries.
    color: Color | None = None                       # First 3 digest bytes.
    grid: Tuple[GridCell, ...] | None = None         # Row-major 5x5 cells.
    pixel_map: Tuple[Rectangle, ...] | None = None   # One per kept grid cell.
