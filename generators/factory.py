from typing import Any, Dict, List, Optional

from plugins.factory import load_plugins
from .comment_generator import CommentGeneratorConfig, DefaultCommentGenerator
from .generator import SqlMapGenerator


def create_sql_map_generator(plugin_configs: List[Dict[str, Any]],
                             comment_generator_config: Optional[CommentGeneratorConfig] = None) -> SqlMapGenerator:
    """Factory function to create a SqlMapGenerator from configuration

    Args:
        plugin_configs: Plugin configuration dictionaries, in execution order. Each contains:
            - type: "cache" or a "package.module:ClassName" path
            - properties: Optional plugin-level properties
        comment_generator_config: Optional comment generator settings

    Returns:
        SqlMapGenerator with a shared comment generator and all valid plugins
    """
    comment_generator = DefaultCommentGenerator(comment_generator_config)
    plugins = load_plugins(plugin_configs, comment_generator)
    return SqlMapGenerator(plugins=plugins, comment_generator=comment_generator)
