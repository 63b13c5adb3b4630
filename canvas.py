from __future__ import annotations
import logging
import numpy as np
from PIL import Image, ImageDraw
from geometry import Point
from colors import Color, WHITE

logger = logging.getLogger(__name__)

class Canvas:
    """Fixed-size RGB raster that shapes draw onto.

    Geometry arrives in exact coordinates and is rounded to the nearest pixel
    here. Anything outside the raster is clipped by Pillow.
    """

    def __init__(self, width: int, height: int, background: Color = WHITE):
        self.width = width
        self.height = height
        self.background = background
        self.image = Image.new('RGB', (width, height), background.as_tuple())
        self._draw = ImageDraw.Draw(self.image)

    def draw_ellipse(self, center: Point, radius: Point, color: Color):
        cx, cy = center.rounded()
        rx = int(round(abs(radius.x)))
        ry = int(round(abs(radius.y)))
        self._draw.ellipse([cx - rx, cy - ry, cx + rx, cy + ry], fill=color.as_tuple())

    def draw_line(self, start: Point, end: Point, color: Color):
        self._draw.line([start.rounded(), end.rounded()], fill=color.as_tuple(), width=1)

    def draw_polygon(self, points: list[Point], color: Color):
        pixels = [p.rounded() for p in points]
        if len(pixels) == 0:
            return
        if len(pixels) == 1:
            self._draw.point(pixels, fill=color.as_tuple())
        elif len(pixels) == 2:
            self._draw.line(pixels, fill=color.as_tuple(), width=1)
        else:
            self._draw.polygon(pixels, fill=color.as_tuple())

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.image.getpixel((x, y))
        return Color(r, g, b)

    def get_rgb_buffer(self) -> np.ndarray:
        return np.asarray(self.image, dtype=np.uint8).copy()

    def save(self, path: str):
        self.image.save(path)
        logger.info("wrote %dx%d image to %s", self.width, self.height, path)
