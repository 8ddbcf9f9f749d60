"""Entry point for generate-docs."""

import sys
from pathlib import Path

from loguru import logger

from themeshift.analysis.models import ComponentAnalysis
from themeshift.cli.common import bootstrap, require_target
from themeshift.cli.parser import create_docs_parser
from themeshift.core import Config, MigrationMethod
from themeshift.docgen import (
    DocumentationGenerator,
    DocumentationOptions,
    load_batch_results,
    load_component_analysis,
    load_migration_result,
    sidecar_path,
)
from themeshift.migration import MigrationResult
from themeshift.utils import Constants


def _load_migration(explicit: str | None, component: str) -> MigrationResult | None:
    """Load an explicit migration result, or the sidecar next to the component.

    Raises:
        ValueError: If an explicit file is malformed
        OSError: If an explicit file cannot be read
    """
    if explicit:
        return load_migration_result(explicit)
    path = sidecar_path(component, "migration")
    if not path.is_file():
        return None
    try:
        return load_migration_result(path)
    except (ValueError, OSError):
        logger.warning(f"⚠️  Ignoring unreadable migration sidecar {path}")
        return None


def _load_analysis(explicit: str | None, component: str) -> ComponentAnalysis | None:
    """Load an explicit component analysis, or the sidecar next to the component.

    Raises:
        ValueError: If an explicit file is malformed
        OSError: If an explicit file cannot be read
    """
    if explicit:
        return load_component_analysis(explicit, component)
    path = sidecar_path(component, "analysis")
    if not path.is_file():
        return None
    try:
        return load_component_analysis(path, component)
    except (ValueError, OSError):
        logger.warning(f"⚠️  Ignoring unreadable analysis sidecar {path}")
        return None


def _generate_batch(args, config: Config, generator: DocumentationGenerator, target: str) -> Path:
    results, time_taken = load_batch_results(target)
    if args.time is not None:
        time_taken = args.time
    content = generator.generate_batch_summary(results, time_taken)
    output_path = Path(args.output or Path(config.docs_dir) / Constants.BATCH_SUMMARY_FILENAME)
    generator.save_documentation(content, output_path)
    return output_path


def _generate_single(args, generator: DocumentationGenerator, target: str) -> Path:
    options = DocumentationOptions(
        component_path=target,
        migration_result=_load_migration(args.migration, target),
        component_analysis=_load_analysis(args.analysis, target),
        output_path=args.output,
        method=MigrationMethod(args.method),
        time_taken=(
            args.time if args.time is not None else Constants.DEFAULT_TIME_TAKEN_MINUTES
        ),
        additional_notes=args.notes,
    )
    content = generator.generate_documentation(options)
    output_path = Path(args.output or generator.default_output_path(target))
    generator.save_documentation(content, output_path)
    return output_path


def main(argv: list[str] | None = None) -> int:
    """Run generate-docs and return the process exit code."""
    parser = create_docs_parser()
    args = parser.parse_args(argv)

    try:
        config = bootstrap(args, parser)
    except (ValueError, OSError):
        return 1

    target = require_target(args, "component file" if not args.batch else "results file")
    if target is None:
        return 1
    if args.time is not None and args.time < 0:
        parser.error("--time must not be negative")

    generator = DocumentationGenerator(config)
    try:
        if args.batch:
            output_path = _generate_batch(args, config, generator, target)
        else:
            output_path = _generate_single(args, generator, target)
    except (ValueError, OSError):
        return 1

    print(f"✓ Documentation generated: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
