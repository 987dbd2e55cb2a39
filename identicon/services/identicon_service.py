from __future__ import annotations
from dataclasses import replace
from hashlib import md5
from typing import List, Sequence, Union
import logging

from ..exceptions import InsufficientDigestLength
from ..models.image import Image

logger = logging.getLogger(__name__)

GRID_SIZE = 5                       # cells per side
CELL_SIZE = 50                      # pixels per cell side
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
CHUNK_SIZE = 3                      # digest bytes per grid row


class IdenticonService:
    """
    Pure pipeline stages turning an input string into coloured rectangles.
    *   No I/O here: every method takes an Image and returns a new one.
    *   No state is kept between calls.
    """

    @staticmethod
    def hash_input(value: Union[str, bytes]) -> Image:
        """
        MD5 the raw input bytes (str is UTF-8 encoded) into a 16-byte digest.
        """
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        digest = tuple(md5(data).digest())
        logger.debug(f"Hashed {len(data)} input byte(s) into {len(digest)}-byte digest")
        return Image(digest=digest)

    @staticmethod
    def pick_color(image: Image) -> Image:
        """
        Use the first three digest bytes as (r, g, b).
        """
        digest = image.digest
        if len(digest) < CHUNK_SIZE:
            raise InsufficientDigestLength(len(digest), CHUNK_SIZE)
        r, g, b = digest[:3]
        return replace(image, color=(r, g, b))

    @staticmethod
    def mirror_row(row: Sequence[int]) -> List[int]:
        """
        [a, b, c] -> [a, b, c, b, a]

        >>> IdenticonService.mirror_row([1, 2, 3])
        [1, 2, 3, 2, 1]
        """
        if len(row) < 2:
            raise ValueError(f"Cannot mirror a row of {len(row)} element(s)")
        first, second = row[0], row[1]
        return list(row) + [second, first]

    @staticmethod
    def build_grid(image: Image) -> Image:
        """
        Chunk the digest into rows of 3 (a trailing partial chunk is dropped,
        so an MD5 digest loses its 16th byte), mirror each row into 5 cells,
        flatten, and tag every cell with its row-major index.

        Args:
            image (Image): An image with its digest set.
        Returns:
            (Image): A copy with `grid` holding (value, index) pairs.
        """
        digest = image.digest
        if len(digest) < CHUNK_SIZE:
            raise InsufficientDigestLength(len(digest), CHUNK_SIZE)

        full = len(digest) - len(digest) % CHUNK_SIZE
        rows = [digest[i:i + CHUNK_SIZE] for i in range(0, full, CHUNK_SIZE)]

        values = [value for row in rows for value in IdenticonService.mirror_row(row)]
        grid = tuple((value, index) for index, value in enumerate(values))
        return replace(image, grid=grid)

    @staticmethod
    def filter_odd_squares(image: Image) -> Image:
        """
        Keep only cells whose value is even. This is what creates the pattern.
        """
        grid = tuple((value, index) for value, index in image.grid if value % 2 == 0)
        logger.debug(f"Kept {len(grid)}/{len(image.grid)} grid cells")
        return replace(image, grid=grid)

    @staticmethod
    def build_pixel_map(image: Image) -> Image:
        """
        Turn every kept cell index into a (top_left, bottom_right) rectangle
        on the 250x250 canvas.
        """
        pixel_map = []
        for _value, index in image.grid:
            horizontal = (index % GRID_SIZE) * CELL_SIZE
            vertical = (index // GRID_SIZE) * CELL_SIZE

            top_left = (horizontal, vertical)
            bottom_right = (horizontal + CELL_SIZE, vertical + CELL_SIZE)
            pixel_map.append((top_left, bottom_right))

        return replace(image, pixel_map=tuple(pixel_map))

    def build(self, value: Union[str, bytes]) -> Image:
        """
        Run every pure stage: hash -> color -> grid -> filter -> pixel map.
        """
        image = self.hash_input(value)
        image = self.pick_color(image)
        image = self.build_grid(image)
        image = self.filter_odd_squares(image)
        return self.build_pixel_map(image)
