from __future__ import annotations
import numpy as np
from colors import Color, WHITE
from canvas import Canvas
from svg_document import SVGDocument

class Renderer:
    def __init__(self, document: SVGDocument, background: Color = WHITE):
        self.document = document
        self.canvas = Canvas(document.width, document.height, background)

    def render(self) -> Canvas:
        # Document order is paint order: later shapes cover earlier ones.
        for shape in self.document.shapes:
            shape.draw(self.canvas)
        return self.canvas

    def get_rgb_buffer(self) -> np.ndarray:
        return self.canvas.get_rgb_buffer()

def convert(svg_path: str, png_path: str, background: Color = WHITE,
            strict: bool = True) -> SVGDocument:
    document = SVGDocument.from_file(svg_path, strict=strict)
    Renderer(document, background).render().save(png_path)
    return document
