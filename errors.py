from __future__ import annotations

class SVGError(Exception):
    pass

class DocumentLoadError(SVGError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load {path}: {reason}")

class ParseError(SVGError):
    def __init__(self, tag: str, attribute: str, message: str):
        self.tag = tag
        self.attribute = attribute
        self.message = message
        super().__init__(f"<{tag}> {attribute}: {message}")

class AttributeParseError(ParseError):
    pass

class ColorResolutionError(ParseError):
    pass

class TransformSyntaxError(SVGError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unrecognized transform: {value!r}")
