from typing import List, Optional

from loguru import logger

from common.dom import Attribute, Document, XmlElement
from .introspected_table import IntrospectedTable

MYBATIS3_MAPPER_PUBLIC_ID = "-//mybatis.org//DTD Mapper 3.0//EN"
MYBATIS3_MAPPER_SYSTEM_ID = "http://mybatis.org/dtd/mybatis-3-mapper.dtd"


class SqlMapGenerator:
    """Builds the SQL-map document for a table and runs the plugin chain on it"""

    def __init__(self, plugins: Optional[List] = None, comment_generator=None):
        self.plugins = plugins or []
        self.comment_generator = comment_generator

    def _create_document(self, introspected_table: IntrospectedTable) -> Document:
        root = XmlElement("mapper")
        root.add_attribute(Attribute("namespace", introspected_table.namespace))
        if self.comment_generator is not None:
            self.comment_generator.add_root_comment(root)

        return Document(
            public_id=MYBATIS3_MAPPER_PUBLIC_ID,
            system_id=MYBATIS3_MAPPER_SYSTEM_ID,
            root_element=root,
        )

    def generate(self, introspected_table: IntrospectedTable) -> Optional[Document]:
        """Generate the document, or return None if a plugin vetoed it"""
        document = self._create_document(introspected_table)

        for plugin in self.plugins:
            if not plugin.sql_map_document_generated(document, introspected_table):
                logger.info(
                    f"Plugin {plugin.name} disabled SQL map generation for {introspected_table.name}"
                )
                return None

        return document
