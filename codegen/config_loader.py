import os
import re
import yaml
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from pathlib import Path
from loguru import logger
from dotenv import load_dotenv

from common.properties import stringify_properties
from generators.comment_generator import CommentGeneratorConfig

ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass
class ContextConfig:
    id: str = "default"
    target_package: str = ""
    comment_generator: CommentGeneratorConfig = field(default_factory=CommentGeneratorConfig)


@dataclass
class PluginConfig:
    type: str
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class TableConfig:
    name: str
    domain_object_name: Optional[str] = None
    namespace: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class RunConfig:
    output_dir: str = "./generated"
    overwrite: bool = False
    log_level: str = "INFO"


@dataclass
class GeneratorConfig:
    context: ContextConfig
    plugins: List[PluginConfig]
    tables: List[TableConfig]
    run: RunConfig


class ConfigLoader:
    """Load and validate mapper generation configuration from YAML files"""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        # Load environment variables from .env file
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug("Loaded environment variables from .env file")
        else:
            logger.debug("No .env file found, using system environment variables")

    def load(self) -> GeneratorConfig:
        """Load configuration from YAML file"""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f) or {}

        if 'tables' not in raw_config:
            raise ValueError("Missing required configuration key: tables")

        # Parse context
        context_data = dict(raw_config.get('context') or {})
        context = ContextConfig(
            id=context_data.get('id', 'default'),
            target_package=context_data.get('target_package', ''),
            comment_generator=CommentGeneratorConfig.from_dict(context_data.get('comment_generator')),
        )

        # Parse plugins
        plugins = []
        for plugin_data in raw_config.get('plugins') or []:
            if 'type' not in plugin_data:
                raise ValueError("Missing required field 'type' in plugin config")
            plugins.append(PluginConfig(
                type=plugin_data['type'],
                properties=self._parse_properties(plugin_data.get('properties')),
            ))

        # Parse tables
        tables = []
        seen = set()
        for table_data in raw_config['tables']:
            if 'name' not in table_data:
                raise ValueError("Missing required field 'name' in table config")
            if table_data['name'] in seen:
                raise ValueError(f"Duplicate table '{table_data['name']}' in table config")
            seen.add(table_data['name'])

            tables.append(TableConfig(
                name=table_data['name'],
                domain_object_name=table_data.get('domain_object_name'),
                namespace=table_data.get('namespace'),
                properties=self._parse_properties(table_data.get('properties')),
            ))

        # Parse run configuration
        run_config = RunConfig(**(raw_config.get('run') or {}))

        return GeneratorConfig(
            context=context,
            plugins=plugins,
            tables=tables,
            run=run_config,
        )

    def _parse_properties(self, raw_properties: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {
            key: self._resolve_env_var(value)
            for key, value in stringify_properties(raw_properties).items()
        }

    def _resolve_env_var(self, value: str) -> str:
        """Resolve ${VAR} references in property values"""
        def replace(match):
            name = match.group(1)
            if name not in os.environ:
                logger.warning(f"Environment variable {name} is not set, leaving reference as-is")
                return match.group(0)
            logger.debug(f"Resolved environment variable {name}")
            return os.environ[name]

        return ENV_REFERENCE.sub(replace, value)
