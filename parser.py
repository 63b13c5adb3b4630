from __future__ import annotations
import logging
import os
import xml.etree.ElementTree as ET
from errors import DocumentLoadError

logger = logging.getLogger(__name__)

def strip_namespace(tag: str) -> str:
    if '}' in tag:
        return tag.split('}', 1)[1]
    return tag

class Node:
    def __init__(self, tag: str, attributes: dict[str, str] | None = None):
        self.tag = tag
        self.attributes = dict(attributes or {})
        self.children: list[Node] = []
        self.parent: Node | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> 'Node':
        node = cls(strip_namespace(element.tag),
                   {strip_namespace(k): v for k, v in element.attrib.items()})
        for child in element:
            if not isinstance(child.tag, str):
                continue
            node.add_node_child(cls.from_element(child))
        return node

    def add_node_child(self, new_node: 'Node') -> 'Node':
        new_node.parent = self
        self.children.append(new_node)
        return new_node

    def get_attribute(self, attr_name: str, default: str | None = None) -> str | None:
        return self.attributes.get(attr_name, default)

    def print_tree(self, level=0):
        indent = '    ' * level
        attrs_str = ', '.join([f"{k}={v}" for k, v in list(self.attributes.items())[:3]])
        if len(self.attributes) > 3:
            attrs_str += "..."
        print(f"{indent}- {self.tag} ({attrs_str})")
        for child in self.children:
            child.print_tree(level + 1)

    def __repr__(self) -> str:
        return f"Node({self.tag!r}, {self.attributes!r}, children={len(self.children)})"

def parse_svg_string(data: str, source: str = '<string>') -> Node:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DocumentLoadError(source, f"malformed XML ({e})") from e

    tree = Node.from_element(root)
    if tree.tag != 'svg':
        raise DocumentLoadError(source, f"root element is <{tree.tag}>, expected <svg>")
    return tree

def parse_svg_file(path: str) -> Node:
    if not os.path.exists(path):
        raise DocumentLoadError(path, "file not found")

    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(path, str(e)) from e

    logger.debug("read %d bytes from %s", len(data), path)
    return parse_svg_string(data, path)
