from __future__ import annotations
import logging

from ..models.image import Color, Image
from ..repositories.canvas_repository import CanvasRepository
from .identicon_service import CANVAS_SIZE

logger = logging.getLogger(__name__)

BACKGROUND: Color = (255, 255, 255)


class DrawingService:
    """
    Rasterizes an Image's pixel map into PNG bytes.
    Delegates the pixel buffer and encoding to CanvasRepository.
    """

    def __init__(self, canvas_repository: CanvasRepository | None = None):
        self.canvas_repository = canvas_repository or CanvasRepository()

    def draw_image(self, image: Image) -> bytes:
        """
        Paint every rectangle of `image.pixel_map` in `image.color` onto a
        white 250x250 canvas and return the encoded PNG.
        """
        if image.color is None or image.pixel_map is None:
            raise ValueError("Image needs both color and pixel_map before drawing")

        canvas = self.canvas_repository.create_canvas(CANVAS_SIZE, CANVAS_SIZE, BACKGROUND)
        for top_left, bottom_right in image.pixel_map:
            self.canvas_repository.fill_rectangle(canvas, top_left, bottom_right, image.color)

        png = self.canvas_repository.encode(canvas, "PNG")
        logger.debug(f"Drew {len(image.pixel_map)} rectangle(s) into {len(png)} PNG bytes")
        return png
