from __future__ import annotations
import math
import re
from dataclasses import dataclass

INT_PATTERN = r'[-+]?[0-9]+'
NUMBER_PATTERN = r'[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)'

int_pattern = re.compile(rf'^\s*({INT_PATTERN})\s*$')

@dataclass(frozen=True)
class Point:
    """A 2D coordinate in raster space (x to the right, y downwards).

    Points are immutable: every transform returns a new Point. Coordinates
    stay exact (int or float) and are only rounded by the canvas.
    """

    x: int | float
    y: int | float

    def translate(self, direction: Point) -> Point:
        return Point(self.x + direction.x, self.y + direction.y)

    def rotate(self, origin: Point, degrees: int | float) -> Point:
        # Positive angles turn clockwise on screen because y grows downwards.
        angle = degrees * math.pi / 180.0
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = self.x - origin.x
        dy = self.y - origin.y
        return Point(origin.x + dx * cos_a - dy * sin_a,
                     origin.y + dx * sin_a + dy * cos_a)

    def scale(self, origin: Point, factor: int | float) -> Point:
        return Point(origin.x + (self.x - origin.x) * factor,
                     origin.y + (self.y - origin.y) * factor)

    def rounded(self) -> tuple[int, int]:
        return (int(round(self.x)), int(round(self.y)))

ORIGIN = Point(0, 0)

def parse_int(value: str) -> int | None:
    if value is None:
        return None
    match = int_pattern.match(value)
    if not match:
        return None
    return int(match.group(1))

def to_number(text: str) -> int | float:
    if '.' in text:
        return float(text)
    return int(text)
