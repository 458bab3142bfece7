# app/normalizers/base.py
from typing import Protocol
from .types import JsonValue, XmlElement

class Normalizer(Protocol):
    def normalize_element(self, node: XmlElement) -> JsonValue:
        """Return a NEW JSON value for `node`. Do not mutate the tree."""
        ...
