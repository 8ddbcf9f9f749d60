"""ThemeShift - Dark-mode to semantic color token migration tools.

Rewrite hardcoded ``dark:`` Tailwind class pairs into semantic tokens, assess
which components are safe to automate, and document the results.
"""

from themeshift.analysis import ComponentAnalyzer
from themeshift.core import Config, default_pattern_table, load_config, load_pattern_table
from themeshift.migration import ColorMigrator
from themeshift.utils.logging import setup_logger

__version__ = "0.3.0"
__all__ = [
    "ColorMigrator",
    "ComponentAnalyzer",
    "Config",
    "default_pattern_table",
    "load_config",
    "load_pattern_table",
    "setup_logger",
]
