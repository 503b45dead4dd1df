from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from common.dom import TextElement, XmlElement


@dataclass
class CommentGeneratorConfig:
    suppress_all_comments: bool = False
    suppress_date: bool = False
    date_format: str = "%a %b %d %H:%M:%S %Y"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'CommentGeneratorConfig':
        return cls(**(config_dict or {}))


class DefaultCommentGenerator:
    """Adds the standard "generated, do not modify" marker to XML elements"""

    def __init__(self, config: CommentGeneratorConfig = None):
        self.config = config or CommentGeneratorConfig()

    def add_comment(self, xml_element: XmlElement):
        if self.config.suppress_all_comments:
            return

        lines = [
            "<!--",
            "  WARNING - @mbg.generated",
            "  This element is automatically generated by the mapper generator, do not modify.",
        ]
        timestamp = self._get_date_string()
        if timestamp is not None:
            lines.append(f"  This element was generated on {timestamp}.")
        lines.append("-->")

        # Comments go before any existing children
        for index, line in enumerate(lines):
            xml_element.add_element_at(index, TextElement(line))

    def add_root_comment(self, root_element: XmlElement):
        """Root elements carry no generated comment"""

    def _get_date_string(self):
        if self.config.suppress_date:
            return None
        return datetime.now().strftime(self.config.date_format)
