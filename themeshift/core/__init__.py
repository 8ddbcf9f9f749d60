"""Core domain logic for themeshift."""

from .config import Config, FileFilter, ScoringConfig, load_config
from .patterns import (
    HeuristicPattern,
    PatternEntry,
    PatternTable,
    default_pattern_table,
    load_pattern_table,
)
from .types import Complexity, MigrationMethod, RiskLevel, TestType

__all__ = [
    "Complexity",
    "Config",
    "FileFilter",
    "HeuristicPattern",
    "MigrationMethod",
    "PatternEntry",
    "PatternTable",
    "RiskLevel",
    "ScoringConfig",
    "TestType",
    "default_pattern_table",
    "load_config",
    "load_pattern_table",
]
