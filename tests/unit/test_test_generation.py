"""Unit tests for validation test scaffolding."""

from pathlib import Path

from themeshift.core import RiskLevel, TestType
from themeshift.testgen import (
    TestGenerationOptions,
    TestGenerator,
    component_identifier,
    default_test_path,
    relative_import_path,
)


def _render(**options) -> str:
    options.setdefault("component_path", "components/ui/avatar-group.tsx")
    options.setdefault("output_path", "components/ui/__tests__/avatar-group.test.tsx")
    return TestGenerator().generate_tests(TestGenerationOptions(**options))


class TestNaming:
    """Test identifiers and paths derived from the component file."""

    def test_identifier_is_pascal_case(self) -> None:
        """When the stem is kebab-case, the identifier is PascalCase."""
        assert component_identifier("ui/avatar-group.tsx") == "AvatarGroup"

    def test_default_path_is_tests_folder(self) -> None:
        """When no output is given, tests go to __tests__ beside the component."""
        assert default_test_path("components/ui/button.tsx") == Path(
            "components/ui/__tests__/button.test.tsx"
        )

    def test_import_path_is_relative_to_output(self) -> None:
        """When the test sits in __tests__, the import climbs one directory."""
        import_path = relative_import_path(
            "components/ui/__tests__/button.test.tsx", "components/ui/button.tsx"
        )
        assert import_path == "../button"

    def test_import_path_in_same_directory(self) -> None:
        """When the test sits beside the component, the import starts with './'."""
        assert relative_import_path("ui/button.test.tsx", "ui/button.tsx") == "./button"


class TestGenerateTests:
    """Test the rendered test file."""

    def test_imports_component(self) -> None:
        """When rendered, the component is imported by its identifier."""
        assert "import { AvatarGroup } from '../avatar-group';" in _render()

    def test_unit_only_has_no_visual_test(self) -> None:
        """When only unit tests are requested, Playwright is not used."""
        assert "@playwright" not in _render(test_type=TestType.UNIT)

    def test_visual_only_has_no_semantic_check(self) -> None:
        """When only visual tests are requested, unit checks are left out."""
        assert "should use semantic color tokens" not in _render(test_type=TestType.VISUAL)

    def test_high_risk_uses_tight_tolerance(self) -> None:
        """When risk is high, the visual tolerance is 5 pixels."""
        assert "maxDiffPixels: 5," in _render(risk_level=RiskLevel.HIGH)

    def test_low_risk_threshold(self) -> None:
        """When risk is low, the screenshot threshold is 0.85."""
        assert "threshold: 0.85," in _render(risk_level=RiskLevel.LOW)

    def test_lists_semantic_tokens(self) -> None:
        """When custom tokens are given, they are listed in the semantic check."""
        generator = TestGenerator(["bg-card"])
        content = generator.generate_tests(
            TestGenerationOptions(component_path="ui/card.tsx", output_path="ui/card.test.tsx")
        )
        assert "      'bg-card'," in content

    def test_saves_file(self, tmp_path) -> None:
        """When saved, missing parent directories are created."""
        output = tmp_path / "__tests__" / "card.test.tsx"
        TestGenerator().save_test_file("test();\n", output)
        assert output.read_text(encoding="utf-8") == "test();\n"
