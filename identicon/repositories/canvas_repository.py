from io import BytesIO
import numpy as np
from PIL import Image as PILImage
from ..models.canvas import Canvas
from ..models.image import Color, Point


class CanvasRepository:
    """
    Handles pixel buffers and PNG encoding for Canvas entities.
    The only place that knows Pillow is the drawing backend.
    """

    @staticmethod
    def create_canvas(width: int, height: int, background: Color = (255, 255, 255)) -> Canvas:
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = background
        return Canvas(pixels=pixels)

    @staticmethod
    def fill_rectangle(canvas: Canvas, top_left: Point, bottom_right: Point, color: Color) -> None:
        """
        Paint the half-open box [x0, x1) x [y0, y1), clipped to the canvas.
        """
        (x0, y0), (x1, y1) = top_left, bottom_right
        x0, x1 = max(0, x0), min(canvas.width, x1)
        y0, y1 = max(0, y0), min(canvas.height, y1)
        if x0 >= x1 or y0 >= y1:
            return
        canvas.pixels[y0:y1, x0:x1] = color

    @staticmethod
    def encode(canvas: Canvas, fmt: str = "PNG") -> bytes:
        pixels = canvas.pixels
        if not pixels.flags['C_CONTIGUOUS']:
            pixels = np.ascontiguousarray(pixels)

        buffer = BytesIO()
        PILImage.fromarray(pixels).save(buffer, format=fmt)
        return buffer.getvalue()

    @staticmethod
    def decode(data: bytes) -> Canvas:
        with PILImage.open(BytesIO(data)) as pil_img:
            return Canvas(pixels=np.asarray(pil_img.convert("RGB")).copy())
