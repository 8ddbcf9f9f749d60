"""Unit tests for the component scoring heuristics.

Tests verify complexity, risk and readiness verdicts. Each test has a single
assertion and focuses on behavior.
"""

from themeshift.analysis.scoring import (
    Signals,
    assess_automation_readiness,
    calculate_complexity,
    calculate_risk_level,
    categorize_component,
    estimate_patterns,
    extract_signals,
)
from themeshift.core import Complexity, RiskLevel, ScoringConfig
from themeshift.core.patterns import DEFAULT_HEURISTICS

SCORING = ScoringConfig()
CUSTOM_COLOR_CARD = '<div className="dark:bg-gray-800 bg-white" style={{color: "#FF0000"}} />'


def _signals(count: int = 1, **flags) -> Signals:
    return Signals(
        dark_classes=tuple(f"dark:bg-gray-{i}" for i in range(count)),
        has_animations=flags.get("animations", False),
        has_variants=flags.get("variants", False),
        has_business_logic=flags.get("logic", False),
        has_custom_colors=flags.get("colors", False),
    )


def _readiness(content: str) -> tuple[bool, list[str]]:
    signals = extract_signals(content)
    complexity = calculate_complexity(signals, SCORING)
    estimated = estimate_patterns(content, DEFAULT_HEURISTICS)
    return assess_automation_readiness(complexity, signals, estimated, DEFAULT_HEURISTICS, SCORING)


class TestExtractSignals:
    """Test signal extraction from file text."""

    def test_counts_unique_dark_classes(self) -> None:
        """When a dark class repeats, it is counted once."""
        signals = extract_signals("dark:bg-gray-800 dark:bg-gray-800 dark:text-white")
        assert signals.dark_class_count == 2

    def test_detects_custom_colors(self) -> None:
        """When a hex color is present, the custom color flag is set."""
        assert extract_signals('style={{ color: "#FF0000" }}').has_custom_colors is True

    def test_detects_animations(self) -> None:
        """When a transition class is present, the animation flag is set."""
        assert extract_signals('className="transition-all"').has_animations is True

    def test_detects_business_logic(self) -> None:
        """When a useState call is present, the business logic flag is set."""
        assert extract_signals("const [a, setA] = useState(0);").has_business_logic is True


class TestCalculateComplexity:
    """Test complexity tiers."""

    def test_zero_dark_classes_is_simple(self) -> None:
        """When no dark classes exist, complexity is simple regardless of flags."""
        signals = _signals(0, animations=True, variants=True, logic=True, colors=True)
        assert calculate_complexity(signals, SCORING) is Complexity.SIMPLE

    def test_few_classes_without_flags_is_simple(self) -> None:
        """When there are few dark classes and no flags, complexity is simple."""
        assert calculate_complexity(_signals(2), SCORING) is Complexity.SIMPLE

    def test_animation_raises_to_medium(self) -> None:
        """When a small file is animated, complexity is medium."""
        assert calculate_complexity(_signals(1, animations=True), SCORING) is Complexity.MEDIUM

    def test_many_classes_with_flags_is_complex(self) -> None:
        """When a file has many classes, animations and variants, complexity is complex."""
        signals = _signals(11, animations=True, variants=True)
        assert calculate_complexity(signals, SCORING) is Complexity.COMPLEX

    def test_weights_are_configurable(self) -> None:
        """When animation points are zero, an animated small file stays simple."""
        scoring = ScoringConfig(animation_points=0)
        assert calculate_complexity(_signals(1, animations=True), scoring) is Complexity.SIMPLE


class TestCalculateRiskLevel:
    """Test risk classification."""

    def test_high_risk_category_is_high(self) -> None:
        """When the category is on the high-risk list, risk is high."""
        risk = calculate_risk_level(Complexity.SIMPLE, _signals(1), "auth", SCORING)
        assert risk is RiskLevel.HIGH

    def test_complex_is_high(self) -> None:
        """When complexity is complex, risk is high."""
        risk = calculate_risk_level(Complexity.COMPLEX, _signals(1), "ui", SCORING)
        assert risk is RiskLevel.HIGH

    def test_animated_and_stateful_is_high(self) -> None:
        """When a file is both animated and stateful, risk is high."""
        signals = _signals(1, animations=True, logic=True)
        assert calculate_risk_level(Complexity.SIMPLE, signals, "ui", SCORING) is RiskLevel.HIGH

    def test_stateful_is_medium(self) -> None:
        """When a simple file has business logic, risk is medium."""
        signals = _signals(1, logic=True)
        assert calculate_risk_level(Complexity.SIMPLE, signals, "ui", SCORING) is RiskLevel.MEDIUM

    def test_plain_simple_is_low(self) -> None:
        """When a simple file has no flags, risk is low."""
        assert calculate_risk_level(Complexity.SIMPLE, _signals(1), "ui", SCORING) is RiskLevel.LOW


class TestCategorizeComponent:
    """Test category derivation from paths."""

    def test_reads_components_segment(self) -> None:
        """When the path contains components/auth/, the category is auth."""
        category = categorize_component("src/components/auth/login.tsx", SCORING.known_categories)
        assert category == "auth"

    def test_unknown_path_is_other(self) -> None:
        """When no known segment is present, the category is other."""
        assert categorize_component("src/pages/index.tsx", SCORING.known_categories) == "other"


class TestAutomationReadiness:
    """Test the readiness rule chain."""

    def test_safe_simple_file_is_ready(self) -> None:
        """When a simple file only uses safe patterns, it is ready."""
        ready, _ = _readiness('<div className="dark:bg-gray-800 bg-white" />')
        assert ready is True

    def test_custom_colors_are_not_ready(self) -> None:
        """When a file has a hex color, it is not ready."""
        ready, _ = _readiness(CUSTOM_COLOR_CARD)
        assert ready is False

    def test_custom_colors_add_note(self) -> None:
        """When a file has a hex color, a manual review note is added."""
        _, notes = _readiness(CUSTOM_COLOR_CARD)
        assert "Contains custom colors - needs manual review" in notes

    def test_no_dark_classes_is_not_ready(self) -> None:
        """When no dark classes remain, the file is not ready."""
        ready, _ = _readiness('<div className="bg-surface" />')
        assert ready is False

    def test_medium_complexity_is_ready_with_note(self) -> None:
        """When complexity is medium, the file is ready but flagged for verification."""
        _, notes = _readiness('<div className="dark:bg-gray-800 bg-white transition-colors" />')
        assert "Medium complexity - automate with careful verification" in notes

    def test_variants_with_many_classes_are_not_ready(self) -> None:
        """When a variant component has many dark classes, it is not ready."""
        classes = " ".join(f"dark:bg-gray-{i}" for i in range(11))
        ready, _ = _readiness(f'const v = {{ variant: "primary" }}; "{classes}"')
        assert ready is False
