# app/normalizers/types.py
from typing import Any, Dict, List, Union
from xml.dom.minidom import Element

# JSON-compatible values produced by a normalizer
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, Dict[str, Any], List[Any]]
JsonObject = Dict[str, JsonValue]

# Parsed XML node handed to a normalizer (DOM element, qualified names kept)
XmlElement = Element

# Reserved keys in a normalized element
ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"
