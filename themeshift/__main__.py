"""Main entry point for the themeshift package.

Usage: ``python -m themeshift <tool> [args...]`` where tool is one of
migrate, analyze, docs or tests.
"""

import sys

from themeshift.cli import analyze, docs, migrate, tests

TOOLS = {
    "migrate": migrate.main,
    "analyze": analyze.main,
    "docs": docs.main,
    "tests": tests.main,
}


def main(argv: list[str] | None = None) -> int:
    """Dispatch to one of the themeshift tools."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in TOOLS:
        print(f"usage: themeshift {{{','.join(TOOLS)}}} [args...]", file=sys.stderr)
        return 0 if argv and argv[0] in ("-h", "--help") else 1
    return TOOLS[argv[0]](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
