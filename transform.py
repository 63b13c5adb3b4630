from __future__ import annotations
import re
from dataclasses import dataclass, field
from parser import Node
from errors import AttributeParseError, TransformSyntaxError
from geometry import NUMBER_PATTERN, ORIGIN, Point, to_number

transform_pattern = re.compile(
    rf'^\s*(?:'
    rf'rotate\(\s*(?P<degrees>{NUMBER_PATTERN})\s*\)'
    rf'|translate\(\s*(?P<tx>{NUMBER_PATTERN})\s+(?P<ty>{NUMBER_PATTERN})\s*\)'
    rf'|scale\(\s*(?P<factor>{NUMBER_PATTERN})\s*\)'
    rf')\s*$'
)
origin_pattern = re.compile(rf'^\s*({NUMBER_PATTERN})\s+({NUMBER_PATTERN})\s*$')

@dataclass(frozen=True)
class Transform:
    """The single transform an element may carry, plus its pivot.

    Only one of the three kinds is ever non-identity. ``apply`` always runs
    rotate, translate, scale in that order.
    """

    rotate: int | float = 0
    translate: Point = field(default=ORIGIN)
    scale: int | float = 1
    origin: Point = field(default=ORIGIN)

    def is_identity(self) -> bool:
        return self.rotate == 0 and self.translate == ORIGIN and self.scale == 1

    def with_origin(self, origin: Point) -> 'Transform':
        return Transform(self.rotate, self.translate, self.scale, origin)

    def apply(self, shape):
        # Identity steps are skipped so integer geometry stays integral.
        if self.rotate != 0:
            shape.rotate(self.origin, self.rotate)
        if self.translate != ORIGIN:
            shape.translate(self.translate)
        if self.scale != 1:
            shape.scale(self.origin, self.scale)
        return shape

IDENTITY = Transform()

def parse_transform(transform_str: str) -> Transform:
    match = transform_pattern.match(transform_str)
    if not match:
        raise TransformSyntaxError(transform_str)

    if match.group('degrees') is not None:
        return Transform(rotate=to_number(match.group('degrees')))
    if match.group('factor') is not None:
        return Transform(scale=to_number(match.group('factor')))
    return Transform(translate=Point(to_number(match.group('tx')), to_number(match.group('ty'))))

def parse_transform_origin(origin_str: str) -> Point:
    match = origin_pattern.match(origin_str)
    if not match:
        raise ValueError(origin_str)
    return Point(to_number(match.group(1)), to_number(match.group(2)))

def get_node_transform(node: Node) -> Transform:
    """Read ``transform`` and ``transform_origin`` from one element.

    A malformed ``transform`` propagates as TransformSyntaxError so the caller
    can record it before falling back to IDENTITY; a malformed
    ``transform_origin`` is an AttributeParseError.
    """
    origin = ORIGIN
    origin_str = node.get_attribute('transform_origin')
    if origin_str is not None:
        try:
            origin = parse_transform_origin(origin_str)
        except ValueError as e:
            raise AttributeParseError(node.tag, 'transform_origin',
                                      f"expected 'X Y', got {origin_str!r}") from e

    transform_str = node.get_attribute('transform')
    if transform_str is None:
        return IDENTITY.with_origin(origin)

    return parse_transform(transform_str).with_origin(origin)
