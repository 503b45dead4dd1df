"""
Minimal XML document model for generated mapper files
"""

from dataclasses import dataclass
from typing import List, Optional, Union
from xml.sax.saxutils import escape

INDENT = "  "


def _indent(level: int) -> str:
    return INDENT * level


@dataclass(frozen=True)
class Attribute:
    name: str
    value: str

    def get_formatted_content(self) -> str:
        value = escape(self.value, {'"': "&quot;"})
        return f'{self.name}="{value}"'


class TextElement:
    """Raw text line, used for comments and SQL fragments"""

    def __init__(self, content: str):
        self.content = content

    def get_formatted_content(self, indent_level: int = 0) -> str:
        return _indent(indent_level) + self.content


class XmlElement:
    """XML element with ordered attributes and child nodes"""

    def __init__(self, name: str):
        self.name = name
        self.attributes: List[Attribute] = []
        self.elements: List[Union["XmlElement", TextElement]] = []

    def add_attribute(self, attribute: Attribute):
        self.attributes.append(attribute)

    def add_element(self, element: Union["XmlElement", TextElement]):
        self.elements.append(element)

    def add_element_at(self, index: int, element: Union["XmlElement", TextElement]):
        self.elements.insert(index, element)

    def get_attribute(self, name: str) -> Optional[str]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return None

    def get_formatted_content(self, indent_level: int = 0) -> str:
        parts = [_indent(indent_level), "<", self.name]
        for attribute in self.attributes:
            parts.append(" ")
            parts.append(attribute.get_formatted_content())

        if not self.elements:
            parts.append("/>")
            return "".join(parts)

        parts.append(">")
        for element in self.elements:
            parts.append("\n")
            parts.append(element.get_formatted_content(indent_level + 1))
        parts.append("\n")
        parts.append(_indent(indent_level))
        parts.append(f"</{self.name}>")
        return "".join(parts)


class Document:
    """XML document with an optional DOCTYPE and a single root element"""

    def __init__(self, public_id: Optional[str] = None, system_id: Optional[str] = None,
                 root_element: Optional[XmlElement] = None):
        self.public_id = public_id
        self.system_id = system_id
        self.root_element = root_element

    def get_formatted_content(self) -> str:
        if self.root_element is None:
            raise ValueError("Document has no root element")

        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        if self.public_id and self.system_id:
            lines.append(
                f'<!DOCTYPE {self.root_element.name} PUBLIC "{self.public_id}" "{self.system_id}">'
            )
        lines.append(self.root_element.get_formatted_content(0))
        return "\n".join(lines) + "\n"
