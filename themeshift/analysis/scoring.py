"""Heuristic scoring rules for component analysis.

Every function here is pure: the same inputs always give the same verdict.
The signals are regex presence checks, not a parse of the source, so text in
comments or string literals counts too.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath
import re

from themeshift.core import Complexity, HeuristicPattern, RiskLevel, ScoringConfig

DARK_CLASS = re.compile(r"dark:[a-zA-Z0-9\-:]+")
ANIMATIONS = re.compile(
    r"animate-|transition|duration-|ease-|delay-|scale-|rotate-|translate-|"
    r"@keyframes|framer-motion",
    re.IGNORECASE,
)
VARIANTS = re.compile(r"variant\s*[=:]\s*[\"']([^\"']+)[\"']|variants:\s*{", re.IGNORECASE)
BUSINESS_LOGIC = re.compile(
    r"useState|useEffect|useReducer|useCallback|useMemo|onClick|onChange|onSubmit|handleSubmit",
    re.IGNORECASE,
)
CUSTOM_COLORS = re.compile(r"#[0-9a-fA-F]{3,6}|rgb\(|rgba\(|hsl\(|hsla\(|oklch\(", re.IGNORECASE)

OTHER_CATEGORY = "other"


@dataclass(frozen=True)
class Signals:
    """Presence flags extracted from a file's text."""

    dark_classes: tuple[str, ...]
    has_animations: bool
    has_variants: bool
    has_business_logic: bool
    has_custom_colors: bool

    @property
    def dark_class_count(self) -> int:
        return len(self.dark_classes)


def extract_signals(content: str) -> Signals:
    """Collect unique dark classes (first-seen order) and the secondary flags."""
    return Signals(
        dark_classes=tuple(dict.fromkeys(DARK_CLASS.findall(content))),
        has_animations=ANIMATIONS.search(content) is not None,
        has_variants=VARIANTS.search(content) is not None,
        has_business_logic=BUSINESS_LOGIC.search(content) is not None,
        has_custom_colors=CUSTOM_COLORS.search(content) is not None,
    )


def categorize_component(scoped_path: str, known_categories: list[str]) -> str:
    """Derive a category from a 'components/<name>/' segment in the path."""
    posix = PurePosixPath(scoped_path.replace("\\", "/")).as_posix()
    for category in known_categories:
        if f"components/{category}/" in posix:
            return category
    return OTHER_CATEGORY


def estimate_patterns(content: str, heuristics: tuple[HeuristicPattern, ...]) -> list[str]:
    return [heuristic.label for heuristic in heuristics if heuristic.detect(content)]


def calculate_complexity(signals: Signals, scoring: ScoringConfig) -> Complexity:
    """Score a file and map the score to a complexity tier.

    A file without dark classes is always simple.
    """
    count = signals.dark_class_count
    if count == 0:
        return Complexity.SIMPLE

    if count <= scoring.few_dark_classes:
        score = scoring.few_points
    elif count <= scoring.some_dark_classes:
        score = scoring.some_points
    else:
        score = scoring.many_points

    if signals.has_animations:
        score += scoring.animation_points
    if signals.has_variants:
        score += scoring.variant_points
    if signals.has_business_logic:
        score += scoring.business_logic_points
    if signals.has_custom_colors:
        score += scoring.custom_color_points

    if score <= scoring.simple_max_score:
        return Complexity.SIMPLE
    if score <= scoring.medium_max_score:
        return Complexity.MEDIUM
    return Complexity.COMPLEX


def calculate_risk_level(
    complexity: Complexity, signals: Signals, category: str, scoring: ScoringConfig
) -> RiskLevel:
    if category in scoring.high_risk_categories:
        return RiskLevel.HIGH
    if complexity is Complexity.COMPLEX or (
        signals.has_animations and signals.has_business_logic
    ):
        return RiskLevel.HIGH
    if complexity is Complexity.MEDIUM or signals.has_animations or signals.has_business_logic:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def assess_automation_readiness(
    complexity: Complexity,
    signals: Signals,
    estimated_patterns: list[str],
    heuristics: tuple[HeuristicPattern, ...],
    scoring: ScoringConfig,
) -> tuple[bool, list[str]]:
    """Decide whether a file can be migrated unattended.

    Rules run top to bottom. Disqualifying rules set the verdict to False and
    every matching rule adds its note.

    Returns:
        Tuple of (ready, notes)
    """
    notes: list[str] = []

    if signals.dark_class_count == 0:
        notes.append("No dark classes found - may already be migrated")
        if signals.has_custom_colors:
            notes.append("Contains custom colors - needs manual review")
        return False, notes

    ready = True
    if signals.has_custom_colors:
        ready = False
        notes.append("Contains custom colors - needs manual review")

    if signals.has_animations and complexity is Complexity.COMPLEX:
        ready = False
        notes.append("Complex animations detected - manual migration recommended")

    if signals.has_variants and signals.dark_class_count > scoring.many_dark_classes:
        ready = False
        notes.append("Multiple variants with many dark classes - manual review needed")

    safe_labels = {heuristic.label for heuristic in heuristics if heuristic.safe}
    if (
        ready
        and complexity is Complexity.SIMPLE
        and all(pattern in safe_labels for pattern in estimated_patterns)
    ):
        notes.append("Ideal automation candidate - simple patterns only")
        return True, notes

    if complexity is Complexity.MEDIUM:
        notes.append("Medium complexity - automate with careful verification")

    for heuristic in heuristics:
        if heuristic.review_note and heuristic.label in estimated_patterns:
            notes.append(heuristic.review_note)

    return ready, notes
