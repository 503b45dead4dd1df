import time
from typing import List, Dict, Any
from loguru import logger

from generators.factory import create_sql_map_generator
from .config_loader import GeneratorConfig
from .planner import TablePlan
from .storage import MapperStorage


class GenerationRunner:
    """Execute a generation plan table by table"""

    def __init__(self, config: GeneratorConfig, storage: MapperStorage):
        self.config = config
        self.storage = storage
        self.generator = create_sql_map_generator(
            plugin_configs=[plugin_config.__dict__ for plugin_config in config.plugins],
            comment_generator_config=config.context.comment_generator,
        )

    def run_single(self, plan: TablePlan) -> bool:
        """Generate and save one mapper. Returns False if a plugin vetoed it."""
        document = self.generator.generate(plan.table)
        if document is None:
            return False

        self.storage.save_document(document, plan.output_path)
        return True

    def run_all(self, plans: List[TablePlan]) -> Dict[str, Any]:
        """Execute all plans sequentially"""
        results = {
            "total": len(plans),
            "written": 0,
            "skipped": 0,
            "failed": 0,
            "failed_tables": [],
        }
        start_time = time.time()

        for plan in plans:
            try:
                if self.run_single(plan):
                    results["written"] += 1
                else:
                    results["skipped"] += 1
            except Exception as e:
                logger.error(f"Failed to generate mapper for {plan.table.name}: {e}")
                results["failed"] += 1
                results["failed_tables"].append(plan.table.name)

        results["time_taken"] = time.time() - start_time
        return results
