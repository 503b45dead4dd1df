import importlib
from typing import Any, Dict, List, Optional

from loguru import logger

from .base import PluginAdapter
from .cache_plugin import CachePlugin

BUILTIN_PLUGINS = {
    "cache": CachePlugin,
}


def _resolve_plugin_class(plugin_type: str):
    builtin = BUILTIN_PLUGINS.get(plugin_type.lower())
    if builtin is not None:
        return builtin

    if ":" not in plugin_type:
        raise ValueError(
            f"Unknown plugin type '{plugin_type}'. "
            f"Use one of {sorted(BUILTIN_PLUGINS)} or a 'package.module:ClassName' path."
        )

    module_name, class_name = plugin_type.split(":", 1)
    try:
        module = importlib.import_module(module_name)
        plugin_class = getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot load plugin '{plugin_type}': {e}") from e

    if not (isinstance(plugin_class, type) and issubclass(plugin_class, PluginAdapter)):
        raise ValueError(f"Plugin '{plugin_type}' is not a PluginAdapter subclass")
    return plugin_class


def create_plugin(plugin_config: Dict[str, Any], comment_generator=None) -> PluginAdapter:
    """Factory function to create a plugin instance from configuration

    Args:
        plugin_config: Plugin configuration dictionary containing:
            - type: "cache" or a "package.module:ClassName" path
            - properties: Optional plugin-level properties
        comment_generator: Comment generator shared by all plugins

    Returns:
        Configured PluginAdapter instance
    """
    if "type" not in plugin_config:
        raise ValueError("Missing required plugin field 'type'")

    plugin_class = _resolve_plugin_class(plugin_config["type"])
    return plugin_class(
        properties=plugin_config.get("properties", {}),
        comment_generator=comment_generator,
    )


def load_plugins(plugin_configs: List[Dict[str, Any]],
                 comment_generator=None) -> List[PluginAdapter]:
    """Create all configured plugins, keeping only those that validate"""
    plugins = []
    for plugin_config in plugin_configs:
        plugin = create_plugin(plugin_config, comment_generator)
        warnings: List[str] = []
        valid = plugin.validate(warnings)
        for warning in warnings:
            logger.warning(f"{plugin.name}: {warning}")
        if not valid:
            logger.warning(f"Plugin {plugin.name} is invalid and will be ignored")
            continue
        plugins.append(plugin)

    logger.debug(f"Loaded {len(plugins)} plugins: {[p.name for p in plugins]}")
    return plugins
