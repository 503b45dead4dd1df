"""
Cache plugin - adds a <cache> element to generated SQL-map documents
"""

from enum import Enum
from typing import List, Optional

from loguru import logger

from common.dom import Attribute, Document, XmlElement
from .base import PluginAdapter


class CacheProperty(Enum):
    EVICTION = ("cache_eviction", "eviction")
    FLUSH_INTERVAL = ("cache_flushInterval", "flushInterval")
    READ_ONLY = ("cache_readOnly", "readOnly")
    SIZE = ("cache_size", "size")
    TYPE = ("cache_type", "type")

    def __init__(self, property_name: str, attribute_name: str):
        self.property_name = property_name
        self.attribute_name = attribute_name


def string_has_value(value: Optional[str]) -> bool:
    return value is not None and len(value) > 0


class CachePlugin(PluginAdapter):
    """Adds a MyBatis ``<cache>`` element to every generated SQL map.

    All properties are optional and are copied as-is onto the element:

        cache_eviction, cache_flushInterval, cache_readOnly, cache_size, cache_type

    Each can be set on the plugin or on an individual table; the table value
    takes precedence. A table value that is present but empty still takes
    precedence, so the attribute is left out instead of falling back to the
    plugin value.
    """

    def validate(self, warnings: List[str]) -> bool:
        return True

    def sql_map_document_generated(self, document: Document, introspected_table) -> bool:
        element = XmlElement("cache")
        if self.comment_generator is not None:
            self.comment_generator.add_comment(element)

        for cache_property in CacheProperty:
            self._add_attribute_if_exists(element, introspected_table, cache_property)

        document.root_element.add_element(element)
        logger.debug(
            f"CachePlugin: added cache element with {len(element.attributes)} attributes "
            f"to {introspected_table.name}"
        )
        return True

    def _add_attribute_if_exists(self, element: XmlElement, introspected_table,
                                 cache_property: CacheProperty):
        value = introspected_table.get_table_configuration_property(cache_property.property_name)
        if value is None:
            value = self.properties.get(cache_property.property_name)

        if string_has_value(value):
            element.add_attribute(Attribute(cache_property.attribute_name, value))
