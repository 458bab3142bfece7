from .xml_tree import XmlTreeNormalizer, get_default_normalizer, merge_child, normalize
from .types import ATTRIBUTES_KEY, TEXT_KEY, JsonObject, JsonValue, XmlElement
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize",
    "merge_child",
    "XmlTreeNormalizer",
    "Normalizer",
    "JsonObject",
    "JsonValue",
    "XmlElement",
    "ATTRIBUTES_KEY",
    "TEXT_KEY",
]
