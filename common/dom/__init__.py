"""
Mapper Document Model

Element tree used to assemble generated SQL-map documents before they are
written to disk.
"""

from .elements import Attribute, TextElement, XmlElement, Document

__all__ = [
    "Attribute",
    "TextElement",
    "XmlElement",
    "Document",
]
