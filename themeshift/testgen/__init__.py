"""Migration validation test generation for themeshift."""

from themeshift.testgen.generator import (
    TestGenerationOptions,
    TestGenerator,
    component_identifier,
    default_test_path,
    relative_import_path,
)

__all__ = [
    "TestGenerationOptions",
    "TestGenerator",
    "component_identifier",
    "default_test_path",
    "relative_import_path",
]
