import re
from typing import Any, Dict, Optional

from common.properties import stringify_properties


def to_camel_case(table_name: str) -> str:
    """users_roles -> UsersRoles"""
    parts = [p for p in re.split(r"[^0-9A-Za-z]+", table_name) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)


class IntrospectedTable:
    """A database table as seen by the generator, with its per-table properties"""

    def __init__(self, name: str, target_package: str = "",
                 domain_object_name: Optional[str] = None,
                 namespace: Optional[str] = None,
                 properties: Optional[Dict[str, Any]] = None):
        self.name = name
        self.target_package = target_package
        self.domain_object_name = domain_object_name or to_camel_case(name)
        self._namespace = namespace
        self.properties: Dict[str, str] = stringify_properties(properties)

    @property
    def mapper_name(self) -> str:
        return f"{self.domain_object_name}Mapper"

    @property
    def namespace(self) -> str:
        if self._namespace:
            return self._namespace
        if self.target_package:
            return f"{self.target_package}.{self.mapper_name}"
        return self.mapper_name

    def get_table_configuration_property(self, property_name: str) -> Optional[str]:
        return self.properties.get(property_name)

    def __repr__(self) -> str:
        return f"IntrospectedTable(name={self.name!r}, namespace={self.namespace!r})"
