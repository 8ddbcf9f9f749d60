"""Validation test scaffolds for migrated components."""

import os
from pathlib import Path

from pydantic import BaseModel

from themeshift.core import RiskLevel, TestType
from themeshift.testgen import templates
from themeshift.utils import Constants, write_file_safely


class TestGenerationOptions(BaseModel):
    """Inputs for one generated test file."""

    __test__ = False  # not a pytest test class

    component_path: str
    output_path: str | None = None
    test_type: TestType = TestType.BOTH
    risk_level: RiskLevel = RiskLevel.MEDIUM


def component_identifier(component_path: str | Path) -> str:
    """Turn 'avatar-group.tsx' into 'AvatarGroup'."""
    stem = Path(component_path).stem
    return "".join(word[:1].upper() + word[1:] for word in stem.split("-") if word)


def default_test_path(component_path: str | Path) -> Path:
    path = Path(component_path)
    return path.parent / "__tests__" / f"{path.stem}.test.tsx"


def relative_import_path(output_path: str | Path | None, component_path: str | Path) -> str:
    """Import specifier for the component as seen from the test file."""
    component = Path(component_path)
    if not output_path:
        target = component.as_posix()
    else:
        target = Path(os.path.relpath(component, Path(output_path).parent)).as_posix()
    for suffix in (".tsx", ".jsx"):
        if target.endswith(suffix):
            target = target[: -len(suffix)]
    if not target.startswith("."):
        target = f"./{target}"
    return target


class TestGenerator:
    """Render Jest + Testing Library (and optionally Playwright) test files."""

    __test__ = False  # not a pytest test class

    def __init__(self, semantic_tokens: list[str] | None = None):
        self.semantic_tokens = semantic_tokens or [
            "bg-surface",
            "text-surface-foreground",
            "border-surface-border",
            "bg-muted",
            "text-muted-foreground",
        ]

    def generate_tests(self, options: TestGenerationOptions) -> str:
        component = component_identifier(options.component_path)
        import_path = relative_import_path(options.output_path, options.component_path)
        tolerance = Constants.VISUAL_TOLERANCES[options.risk_level.value]

        imports = [
            "import React from 'react';",
            "import { render, screen } from '@testing-library/react';",
            f"import {{ {component} }} from '{import_path}';",
            "import '@testing-library/jest-dom';",
        ]
        include_unit = options.test_type in (TestType.UNIT, TestType.BOTH)
        include_visual = options.test_type in (TestType.VISUAL, TestType.BOTH)
        if include_visual:
            imports.append("import { test as visual } from '@playwright/experimental-ct-react';")

        sections = [
            "\n".join(imports),
            templates.SETUP.substitute(
                component=component, risk=options.risk_level.value, tolerance=tolerance
            ),
        ]

        if include_unit:
            semantic_classes = "\n".join(f"      '{token}'," for token in self.semantic_tokens)
            sections += [
                templates.SEMANTIC_TOKENS.substitute(
                    component=component, semantic_classes=semantic_classes
                ),
                templates.NO_HARDCODED_COLORS.substitute(component=component),
                templates.IMPORT_VALIDATION.substitute(import_path=import_path),
                templates.COMPILATION.substitute(component=component),
                templates.INTERACTIVE_STATES.substitute(component=component),
                templates.ACCESSIBILITY.substitute(component=component),
            ]

        if include_visual:
            sections.append(
                templates.VISUAL_REGRESSION.substitute(
                    component=component,
                    tolerance=tolerance,
                    threshold=f"{(100 - tolerance) / 100:.2f}",
                    snapshot=component.lower(),
                )
            )

        sections.append("});")
        return "\n".join(sections) + "\n"

    def save_test_file(self, content: str, output_path: str | Path) -> None:
        write_file_safely(output_path, lambda f: f.write(content), "writing test file")
