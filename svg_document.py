from __future__ import annotations
import logging
from typing import Callable, Iterator
from parser import Node, parse_svg_file, parse_svg_string
from errors import ParseError, TransformSyntaxError
from geometry import Point
from shapes import Circle, Ellipse, Group, Line, Polygon, Polyline, Rect, Shape
from transform import get_node_transform
from attributes import (
    get_color_attribute,
    get_int_attribute,
    get_point_attribute,
    get_points_attribute,
    get_positive_int_attribute,
)

logger = logging.getLogger(__name__)

def build_ellipse(node: Node) -> Shape:
    return Ellipse(get_color_attribute(node, 'fill'),
                   get_point_attribute(node, 'cx', 'cy'),
                   get_point_attribute(node, 'rx', 'ry'),
                   node.get_attribute('id'))

def build_circle(node: Node) -> Shape:
    return Circle(get_color_attribute(node, 'fill'),
                  get_point_attribute(node, 'cx', 'cy'),
                  get_int_attribute(node, 'r'),
                  node.get_attribute('id'))

def build_rect(node: Node) -> Shape:
    return Rect(get_color_attribute(node, 'fill'),
                get_point_attribute(node, 'x', 'y'),
                get_positive_int_attribute(node, 'width'),
                get_positive_int_attribute(node, 'height'),
                node.get_attribute('id'))

def build_line(node: Node) -> Shape:
    return Line(get_color_attribute(node, 'stroke'),
                get_point_attribute(node, 'x1', 'y1'),
                get_point_attribute(node, 'x2', 'y2'),
                node.get_attribute('id'))

def build_polyline(node: Node) -> Shape:
    return Polyline(get_color_attribute(node, 'fill'),
                    get_points_attribute(node),
                    node.get_attribute('id'))

def build_polygon(node: Node) -> Shape:
    return Polygon(get_color_attribute(node, 'fill'),
                   get_points_attribute(node),
                   node.get_attribute('id'))

SHAPE_BUILDERS: dict[str, Callable[[Node], Shape]] = {
    'ellipse': build_ellipse,
    'circle': build_circle,
    'rect': build_rect,
    'line': build_line,
    'polyline': build_polyline,
    'polygon': build_polygon,
}

class SVGDocument:
    """A loaded document: canvas size plus the top-level shapes in paint order.

    With ``strict=True`` the first ParseError aborts the load. With
    ``strict=False`` the offending element (and anything nested in it) is
    dropped and the message is kept in ``errors``. Malformed transforms never
    abort; they fall back to the identity and are reported in ``warnings``.
    """

    def __init__(self, svg_tree: Node, strict: bool = True, source: str = '<string>'):
        self.svg_tree = svg_tree
        self.strict = strict
        self.source = source
        self.width: int = 0
        self.height: int = 0
        self.shapes: list[Shape] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self._extract_viewport_info()
        self.shapes = self._build_children(svg_tree.children)
        logger.info("loaded %s: %dx%d, %d top-level shape(s)",
                    source, self.width, self.height, len(self.shapes))

    @classmethod
    def from_file(cls, path: str, strict: bool = True) -> 'SVGDocument':
        return cls(parse_svg_file(path), strict=strict, source=path)

    @classmethod
    def from_string(cls, data: str, strict: bool = True) -> 'SVGDocument':
        return cls(parse_svg_string(data), strict=strict)

    @property
    def dimensions(self) -> Point:
        return Point(self.width, self.height)

    def _extract_viewport_info(self):
        # The canvas size is needed for anything to happen, so these errors
        # abort in both modes.
        self.width = get_positive_int_attribute(self.svg_tree, 'width')
        self.height = get_positive_int_attribute(self.svg_tree, 'height')

    def _build_children(self, nodes: list[Node]) -> list[Shape]:
        shapes = []
        for node in nodes:
            try:
                shape = self.build_shape(node)
            except ParseError as e:
                if self.strict:
                    raise
                self.errors.append(str(e))
                logger.warning("skipping <%s> in %s: %s", node.tag, self.source, e)
                continue
            if shape is not None:
                shapes.append(shape)
        return shapes

    def build_shape(self, node: Node) -> Shape | None:
        if node.tag == 'g':
            shape = Group(self._build_children(node.children), node.get_attribute('id'))
        else:
            builder = SHAPE_BUILDERS.get(node.tag)
            if builder is None:
                logger.debug("ignoring unsupported element <%s>", node.tag)
                return None
            shape = builder(node)

        return self._apply_transform(node, shape)

    def _apply_transform(self, node: Node, shape: Shape) -> Shape:
        try:
            transform = get_node_transform(node)
        except TransformSyntaxError as e:
            message = f"<{node.tag}> {e}, using identity"
            self.warnings.append(message)
            logger.warning(message)
            return shape
        return transform.apply(shape)

    def walk(self) -> Iterator[Shape]:
        for shape in self.shapes:
            yield shape
            if isinstance(shape, Group):
                yield from shape.walk()

    def find(self, shape_id: str) -> Shape | None:
        for shape in self.walk():
            if shape.id == shape_id:
                return shape
        return None

    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def print_report(self):
        if self.is_valid() and len(self.warnings) == 0:
            print("SVG load: [OK] Valid")
            return

        if not self.is_valid():
            print("SVG load: [ERROR] Elements skipped:")
            for error in self.errors:
                print(f"  ERROR: {error}")

        if self.warnings:
            print("SVG load: [WARNING] Warnings:")
            for warning in self.warnings:
                print(f"  WARNING: {warning}")
