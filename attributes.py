from __future__ import annotations
import re
from parser import Node
from errors import AttributeParseError, ColorResolutionError
from geometry import INT_PATTERN, Point, parse_int
from colors import Color, UnresolvedColorError, parse_color

point_pair_pattern = re.compile(rf'({INT_PATTERN}),({INT_PATTERN})')
whitespace_pattern = re.compile(r'\s+')

def require_attribute(node: Node, attr_name: str) -> str:
    value = node.get_attribute(attr_name)
    if value is None:
        raise AttributeParseError(node.tag, attr_name, "required attribute is missing")
    return value

def get_int_attribute(node: Node, attr_name: str) -> int:
    value = require_attribute(node, attr_name)
    number = parse_int(value)
    if number is None:
        raise AttributeParseError(node.tag, attr_name, f"expected an integer, got {value!r}")
    return number

def get_positive_int_attribute(node: Node, attr_name: str) -> int:
    number = get_int_attribute(node, attr_name)
    if number <= 0:
        raise AttributeParseError(node.tag, attr_name, f"must be positive, got {number}")
    return number

def get_point_attribute(node: Node, x_name: str, y_name: str) -> Point:
    return Point(get_int_attribute(node, x_name), get_int_attribute(node, y_name))

def get_color_attribute(node: Node, attr_name: str) -> Color:
    value = require_attribute(node, attr_name)
    try:
        return parse_color(value)
    except UnresolvedColorError as e:
        raise ColorResolutionError(node.tag, attr_name, str(e)) from e

def parse_points(points_str: str) -> list[Point]:
    """Split ``"x,y x,y ..."`` into Points.

    Raises ValueError carrying the first substring that is not an ``int,int``
    pair.
    """
    points = []
    content = points_str.strip()
    if not content:
        return points

    for token in whitespace_pattern.split(content):
        match = point_pair_pattern.fullmatch(token)
        if not match:
            raise ValueError(token)
        points.append(Point(int(match.group(1)), int(match.group(2))))

    return points

def get_points_attribute(node: Node, attr_name: str = 'points') -> list[Point]:
    value = require_attribute(node, attr_name)
    try:
        return parse_points(value)
    except ValueError as e:
        raise AttributeParseError(node.tag, attr_name, f"malformed point {e.args[0]!r}") from e
