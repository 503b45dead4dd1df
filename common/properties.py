"""
Property values are plain strings, as if written in an XML property element
"""

from typing import Any, Dict, Optional


def to_property_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_properties(raw_properties: Optional[Dict[Any, Any]]) -> Dict[str, str]:
    return {str(key): to_property_string(value) for key, value in (raw_properties or {}).items()}
