from typing import Iterator, List, Optional
from xml.dom import Node

from .base import Normalizer
from .types import ATTRIBUTES_KEY, TEXT_KEY, JsonObject, JsonValue, XmlElement


class _Pending:
    """One element whose children are still being walked."""
    __slots__ = ("node", "obj", "text_parts", "has_element_children", "children")

    def __init__(self, node: XmlElement):
        self.node = node
        self.obj: JsonObject = {}
        self.text_parts: List[str] = []
        self.has_element_children = False
        self.children: Iterator[Node] = iter(node.childNodes)

        if node.attributes is not None and node.attributes.length:
            self.obj[ATTRIBUTES_KEY] = dict(node.attributes.items())

    def resolve(self) -> JsonValue:
        obj = self.obj
        text = "".join(self.text_parts)

        if not self.has_element_children:
            # Leaf: collapse to the bare string when nothing else is there
            if text and not obj:
                return text
            if text:
                obj[TEXT_KEY] = text
            return obj

        if text:
            obj[TEXT_KEY] = text
        return obj


class XmlTreeNormalizer(Normalizer):
    """
    Structural XML -> JSON mapping:
      - attributes go under "@attributes" (qualified names, values untouched),
      - child elements are keyed by their qualified tag name; a repeated tag
        is promoted to a list on its second occurrence and appended to after,
      - trimmed text nodes are joined (no separator) and either returned as
        a bare string (plain leaf) or stored under "#text".
    Only element and text nodes count: CDATA sections, comments and
    processing instructions are skipped.

    The walk keeps its own stack, so document depth is bounded by memory
    rather than the interpreter's recursion limit.
    """
    def normalize_element(self, node: XmlElement) -> JsonValue:
        stack: List[_Pending] = [_Pending(node)]
        result: Optional[JsonValue] = None

        while stack:
            top = stack[-1]
            child = next(top.children, None)

            if child is None:
                stack.pop()
                value = top.resolve()
                if stack:
                    merge_child(stack[-1].obj, top.node.nodeName, value)
                else:
                    result = value
                continue

            if child.nodeType == Node.ELEMENT_NODE:
                top.has_element_children = True
                stack.append(_Pending(child))
            elif child.nodeType == Node.TEXT_NODE:
                value = child.data.strip()
                if value:
                    top.text_parts.append(value)

        return result


def merge_child(obj: JsonObject, name: str, value: JsonValue) -> None:
    """Store `value` under `name`: set, then promote to a list, then append."""
    existing = obj.get(name)
    if name not in obj:
        obj[name] = value
    elif isinstance(existing, list):
        existing.append(value)
    else:
        obj[name] = [existing, value]


_default = XmlTreeNormalizer()


def normalize(node: XmlElement) -> JsonValue:
    """Normalize one parsed element (usually the document root)."""
    return _default.normalize_element(node)


def get_default_normalizer() -> Normalizer:
    """Factory used by the converter; swap here to change the mapping rules."""
    return _default
