"""
Mapper Generation Plugins

Plugins receive each generated SQL-map document and may add to it or veto it.
"""

from .base import PluginAdapter
from .cache_plugin import CachePlugin, CacheProperty
from .factory import create_plugin, load_plugins

__all__ = ['PluginAdapter', 'CachePlugin', 'CacheProperty', 'create_plugin', 'load_plugins']
