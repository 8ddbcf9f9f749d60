"""Entry point for analyze-components."""

import sys

from loguru import logger

from themeshift.analysis import ComponentAnalyzer
from themeshift.cli.common import bootstrap, require_target
from themeshift.cli.parser import create_analyze_parser
from themeshift.core import load_pattern_table
from themeshift.data import InvalidTargetError
from themeshift.reports import export_analysis, write_analysis_report


def main(argv: list[str] | None = None) -> int:
    """Run analyze-components and return the process exit code."""
    parser = create_analyze_parser()
    args = parser.parse_args(argv)

    try:
        config = bootstrap(args, parser)
        table = load_pattern_table(config.pattern_file)
    except (ValueError, OSError):
        return 1

    target = require_target(args, "directory")
    if target is None:
        return 1

    analyzer = ComponentAnalyzer(table, config)
    try:
        summary = analyzer.analyze_path(target)
    except InvalidTargetError:
        return 1
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Analysis interrupted by user")
        raise

    write_analysis_report(sys.stdout, summary)
    if analyzer.skipped:
        logger.warning(f"⚠️  {len(analyzer.skipped)} unreadable file(s) were not analyzed")

    if config.export:
        try:
            export_analysis(config.export, summary, analyzer.results)
        except OSError:
            return 1
        print(f"\nDetailed results exported to: {config.export}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
