"""
Mapper Generator

Builds one SQL-map document per configured table, lets the configured plugins
augment it, and writes the result to disk.
"""

from .config_loader import ConfigLoader, GeneratorConfig
from .planner import GenerationPlanner
from .runner import GenerationRunner
from .storage import MapperStorage

__all__ = ['ConfigLoader', 'GeneratorConfig', 'GenerationPlanner', 'GenerationRunner', 'MapperStorage']
