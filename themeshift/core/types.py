"""Type definitions for themeshift."""

from enum import Enum


class Complexity(Enum):
    """Heuristic complexity tier of a component, in ascending order."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class RiskLevel(Enum):
    """Risk of migrating a component without human review."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MigrationMethod(Enum):
    """How a component was migrated."""

    SCRIPT = "script"
    MANUAL = "manual"


class TestType(Enum):
    """Kind of validation tests to scaffold."""

    __test__ = False  # not a pytest test class

    UNIT = "unit"
    VISUAL = "visual"
    BOTH = "both"
