"""Migration documentation generation for themeshift."""

from themeshift.docgen.generator import (
    DocumentationGenerator,
    DocumentationOptions,
    component_title,
)
from themeshift.docgen.loading import (
    load_batch_results,
    load_component_analysis,
    load_migration_result,
    sidecar_path,
)

__all__ = [
    "DocumentationGenerator",
    "DocumentationOptions",
    "component_title",
    "load_batch_results",
    "load_component_analysis",
    "load_migration_result",
    "sidecar_path",
]
