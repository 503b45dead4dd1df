from pathlib import Path
from typing import List, NamedTuple
from loguru import logger

from generators.introspected_table import IntrospectedTable
from .config_loader import GeneratorConfig
from .storage import MapperStorage


class TablePlan(NamedTuple):
    """Represents a single generation unit: one table and its mapper file"""
    table: IntrospectedTable
    output_path: Path


class GenerationPlanner:
    """Decide which configured tables need a mapper written"""

    def __init__(self, config: GeneratorConfig, storage: MapperStorage):
        self.config = config
        self.storage = storage

    def build_tables(self) -> List[IntrospectedTable]:
        target_package = self.config.context.target_package
        return [
            IntrospectedTable(
                name=table_config.name,
                target_package=target_package,
                domain_object_name=table_config.domain_object_name,
                namespace=table_config.namespace,
                properties=table_config.properties,
            )
            for table_config in self.config.tables
        ]

    def generate_plan(self) -> List[TablePlan]:
        """Generate the plan, skipping existing outputs unless overwrite is set.

        Raises ValueError if two tables resolve to the same mapper file.
        """
        plans = []
        target_package = self.config.context.target_package

        claimed = {}
        for table in self.build_tables():
            output_path = self.storage.get_output_path(target_package, table.mapper_name)
            if output_path in claimed:
                raise ValueError(
                    f"Tables '{claimed[output_path]}' and '{table.name}' both map to {output_path}"
                )
            claimed[output_path] = table.name

            if self.storage.exists(target_package, table.mapper_name) and not self.config.run.overwrite:
                logger.info(f"Skipping {table.name}: {output_path} already exists")
                continue
            plans.append(TablePlan(table=table, output_path=output_path))

        return plans

    def print_plan_summary(self, plans: List[TablePlan]):
        """Print summary of the generation plan"""
        if not plans:
            logger.info("No mappers to generate")
            return

        logger.info(f"=== Generation Plan: {len(plans)} mappers ===")
        for plan in plans:
            logger.info(f"  {plan.table.name} -> {plan.output_path}")
