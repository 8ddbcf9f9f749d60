"""Entry point for generate-tests."""

import sys
from pathlib import Path

from loguru import logger

from themeshift.cli.common import bootstrap, require_target
from themeshift.cli.parser import create_tests_parser
from themeshift.core import RiskLevel, TestType
from themeshift.testgen import TestGenerationOptions, TestGenerator, default_test_path


def main(argv: list[str] | None = None) -> int:
    """Run generate-tests and return the process exit code."""
    parser = create_tests_parser()
    args = parser.parse_args(argv)

    try:
        config = bootstrap(args, parser)
    except (ValueError, OSError):
        return 1

    target = require_target(args, "component file")
    if target is None:
        return 1
    if not Path(target).is_file():
        logger.error(f"✗ Component file not found: {target}")
        return 1

    output_path = Path(args.output) if args.output else default_test_path(target)
    options = TestGenerationOptions(
        component_path=target,
        output_path=str(output_path),
        test_type=TestType(args.test_type),
        risk_level=RiskLevel(args.risk),
    )
    generator = TestGenerator(config.marker_tokens)
    try:
        generator.save_test_file(generator.generate_tests(options), output_path)
    except OSError:
        return 1

    print(f"✓ Tests generated: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
