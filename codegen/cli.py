import argparse
import sys
from loguru import logger

from .config_loader import ConfigLoader
from .planner import GenerationPlanner
from .runner import GenerationRunner
from .storage import MapperStorage


def setup_logging(level: str):
    """Setup logging configuration"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level.upper()
    )


def cmd_generate(args):
    """Generate mapper files"""
    # Load configuration
    try:
        config_loader = ConfigLoader(args.config)
        config = config_loader.load()
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    # Setup logging
    setup_logging(args.log_level or config.run.log_level)

    # Override config with command-line arguments
    if args.overwrite:
        logger.info("Command-line --overwrite flag enabled, overriding config setting")
        config.run.overwrite = True
    if args.output_dir:
        config.run.output_dir = args.output_dir

    storage = MapperStorage(config.run.output_dir)
    planner = GenerationPlanner(config, storage)
    try:
        plans = planner.generate_plan()
    except ValueError as e:
        logger.error(f"Invalid table configuration: {e}")
        return 1
    planner.print_plan_summary(plans)

    if not plans:
        return 0

    runner = GenerationRunner(config, storage)
    results = runner.run_all(plans)

    # Print summary
    logger.info("=== Generation Summary ===")
    logger.info(f"Total tables: {results['total']}")
    logger.info(f"Written: {results['written']}")
    logger.info(f"Vetoed by plugins: {results['skipped']}")
    logger.info(f"Failed: {results['failed']}")

    if results['failed'] > 0:
        logger.warning(f"Some tables failed: {', '.join(results['failed_tables'])}")
        return 1

    return 0


def cmd_list(args):
    """List generated mapper files"""
    storage = MapperStorage(args.output_dir)
    outputs = storage.list_outputs()

    if not outputs:
        print("No mappers found")
        return 0

    print(f"{'Package':<40} {'Mapper':<30} {'Size':<8} {'Updated':<20}")
    print("-" * 100)
    for output in outputs:
        print(f"{output['package']:<40} {output['mapper_name']:<30} {output['size']:<8} {output['updated_at']:<20}")

    print(f"\nTotal: {len(outputs)} mappers")
    return 0


def cmd_info(args):
    """Show configuration information"""
    try:
        config = ConfigLoader(args.config).load()
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    print("=== Configuration Info ===")
    print(f"Context: {config.context.id}")
    print(f"Target package: {config.context.target_package or '(none)'}")

    print(f"\nPlugins: {len(config.plugins)}")
    for plugin in config.plugins:
        print(f"  - {plugin.type}")
        for key, value in plugin.properties.items():
            print(f"      {key} = {value}")

    print(f"\nTables: {len(config.tables)}")
    for table in config.tables:
        overrides = f" (overrides: {', '.join(table.properties)})" if table.properties else ""
        print(f"  - {table.name}{overrides}")

    print(f"\nRun Config:")
    print(f"  - Output Dir: {config.run.output_dir}")
    print(f"  - Overwrite: {config.run.overwrite}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mapper Generator - SQL-map generation with pluggable document augmentation"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Generate command
    generate_parser = subparsers.add_parser('generate', help='Generate mapper files')
    generate_parser.add_argument('config', help='Path to configuration YAML file')
    generate_parser.add_argument('--overwrite', action='store_true', help='Overwrite existing mapper files (override config setting)')
    generate_parser.add_argument('--output-dir', help='Override output directory')
    generate_parser.add_argument('--log-level', help='Override log level (DEBUG, INFO, WARNING, ERROR)')
    generate_parser.set_defaults(func=cmd_generate)

    # List command
    list_parser = subparsers.add_parser('list', help='List generated mappers')
    list_parser.add_argument('--output-dir', default='generated', help='Output directory')
    list_parser.set_defaults(func=cmd_list)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show configuration info')
    info_parser.add_argument('config', help='Path to configuration YAML file')
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
