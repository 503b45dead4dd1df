from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from common.dom import Document
from common.properties import stringify_properties


class PluginAdapter(ABC):
    """Base class for mapper generation plugins.

    Plugin-level properties and the comment generator are injected through the
    constructor. Every hook defaults to ``True`` so subclasses only override the
    hooks they care about. Returning ``False`` from a document hook tells the
    host to drop the document and skip the remaining plugins.
    """

    def __init__(self, properties: Optional[Dict[str, Any]] = None, comment_generator=None):
        self.properties: Dict[str, str] = stringify_properties(properties)
        self.comment_generator = comment_generator

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def validate(self, warnings: List[str]) -> bool:
        """Check plugin configuration, appending human readable problems to ``warnings``"""

    def sql_map_document_generated(self, document: Document, introspected_table) -> bool:
        return True
