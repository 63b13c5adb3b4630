from __future__ import annotations
from dataclasses import dataclass
from PIL import ImageColor

@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

class UnresolvedColorError(ValueError):
    pass

def parse_color(color_str: str) -> Color:
    """Resolve a hex string, rgb() call or CSS colour name to a Color."""
    if color_str is None:
        raise UnresolvedColorError("no color given")

    token = color_str.strip().lower()
    if not token or token == 'none':
        raise UnresolvedColorError(f"{color_str!r} is not a paintable color")

    try:
        rgb = ImageColor.getrgb(token)
    except ValueError as e:
        raise UnresolvedColorError(f"unknown color {color_str!r}") from e

    r, g, b = rgb[:3]
    try:
        return Color(r, g, b)
    except ValueError as e:
        # getrgb passes rgb() channels through unclamped
        raise UnresolvedColorError(f"{color_str!r} is out of range") from e

def parse_rgb_triplet(value: str) -> Color:
    parts = value.split(',')
    if len(parts) != 3:
        raise ValueError(f"expected R,G,B but got {value!r}")
    r, g, b = (max(0, min(255, int(part.strip()))) for part in parts)
    return Color(r, g, b)
