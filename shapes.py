from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Iterator
from geometry import Point
from colors import Color

class Shape(ABC):
    """Common interface of everything that can be drawn and transformed.

    Shapes mutate in place under translate/rotate/scale; the Points and
    Colors they hold are immutable values and are replaced, never edited.
    """

    kind = 'shape'

    def __init__(self, fill: Color | None, shape_id: str | None = None):
        self.fill = fill
        self._id = shape_id

    @property
    def id(self) -> str | None:
        return self._id

    @abstractmethod
    def draw(self, canvas) -> None:
        raise NotImplementedError

    @abstractmethod
    def translate(self, direction: Point) -> None:
        raise NotImplementedError

    @abstractmethod
    def rotate(self, origin: Point, degrees: int | float) -> None:
        raise NotImplementedError

    @abstractmethod
    def scale(self, origin: Point, factor: int | float) -> None:
        raise NotImplementedError

class Ellipse(Shape):
    kind = 'ellipse'

    def __init__(self, fill: Color, center: Point, radius: Point, shape_id: str | None = None):
        super().__init__(fill, shape_id)
        self.center = center
        self.radius = radius

    def draw(self, canvas) -> None:
        canvas.draw_ellipse(self.center, self.radius, self.fill)

    def translate(self, direction: Point) -> None:
        self.center = self.center.translate(direction)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        # Axes stay aligned: only the center moves.
        self.center = self.center.rotate(origin, degrees)

    def scale(self, origin: Point, factor: int | float) -> None:
        self.center = self.center.scale(origin, factor)
        self.radius = Point(self.radius.x * factor, self.radius.y * factor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self.center}, radius={self.radius}, fill={self.fill})"

class Circle(Ellipse):
    kind = 'circle'

    def __init__(self, fill: Color, center: Point, radius: int | float, shape_id: str | None = None):
        super().__init__(fill, center, Point(radius, radius), shape_id)

    @property
    def r(self) -> int | float:
        return self.radius.x

class VertexShape(Shape):
    """Shape whose geometry is an ordered list of vertices."""

    def __init__(self, fill: Color, points: Iterable[Point], shape_id: str | None = None):
        super().__init__(fill, shape_id)
        self.points = list(points)

    def translate(self, direction: Point) -> None:
        self.points = [p.translate(direction) for p in self.points]

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.points = [p.rotate(origin, degrees) for p in self.points]

    def scale(self, origin: Point, factor: int | float) -> None:
        self.points = [p.scale(origin, factor) for p in self.points]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={self.points}, fill={self.fill})"

class Polyline(VertexShape):
    kind = 'polyline'

    def draw(self, canvas) -> None:
        for start, end in zip(self.points, self.points[1:]):
            canvas.draw_line(start, end, self.fill)

class Line(Polyline):
    kind = 'line'

    def __init__(self, fill: Color, start: Point, end: Point, shape_id: str | None = None):
        super().__init__(fill, [start, end], shape_id)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[1]

class Polygon(VertexShape):
    kind = 'polygon'

    def draw(self, canvas) -> None:
        if self.points:
            canvas.draw_polygon(list(self.points), self.fill)

class Rect(Polygon):
    """Axis-aligned rectangle stored as its four corner pixels.

    The far edges are inclusive pixel indices, so a rect at (x, y) covers
    columns x .. x+width-1 and rows y .. y+height-1: exactly width x height
    pixels once filled. Scaling acts on those corners, so a rect scaled by f
    spans (width-1)*f+1 by (height-1)*f+1 pixels, e.g. 10x5 scaled by 2
    fills 19x9.
    """

    kind = 'rect'

    def __init__(self, fill: Color, upper_left: Point, width: int, height: int,
                 shape_id: str | None = None):
        right = upper_left.x + width - 1
        bottom = upper_left.y + height - 1
        super().__init__(fill, [
            upper_left,
            Point(right, upper_left.y),
            Point(right, bottom),
            Point(upper_left.x, bottom),
        ], shape_id)

class Group(Shape):
    kind = 'g'

    def __init__(self, children: Iterable[Shape] = (), shape_id: str | None = None):
        super().__init__(None, shape_id)
        self.children = list(children)

    def draw(self, canvas) -> None:
        for child in self.children:
            child.draw(canvas)

    def translate(self, direction: Point) -> None:
        for child in self.children:
            child.translate(direction)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        for child in self.children:
            child.rotate(origin, degrees)

    def scale(self, origin: Point, factor: int | float) -> None:
        for child in self.children:
            child.scale(origin, factor)

    def walk(self) -> Iterator[Shape]:
        for child in self:
            yield child
            if isinstance(child, Group):
                yield from child.walk()

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Group(id={self.id!r}, children={self.children!r})"
