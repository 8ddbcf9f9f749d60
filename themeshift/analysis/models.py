"""Component analysis models."""

from pydantic import Field

from themeshift.core import Complexity, RiskLevel
from themeshift.core.records import Record


class ComponentAnalysis(Record):
    """Heuristic profile of one component file."""

    file: str
    relative_path: str
    category: str
    complexity: Complexity
    dark_classes: list[str] = Field(default_factory=list)
    dark_class_count: int = Field(0, ge=0)
    has_animations: bool = False
    has_variants: bool = False
    has_business_logic: bool = False
    has_custom_colors: bool = False
    estimated_patterns: list[str] = Field(default_factory=list)
    automation_ready: bool = False
    automation_notes: list[str] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW


class AnalysisSummary(Record):
    """Run-level aggregate of component analyses."""

    total_components: int = 0
    automation_ready: int = 0
    categories: dict[str, int] = Field(default_factory=dict)
    complexity_breakdown: dict[str, int] = Field(
        default_factory=lambda: {c.value: 0 for c in Complexity}
    )
    risk_breakdown: dict[str, int] = Field(default_factory=lambda: {r.value: 0 for r in RiskLevel})
    pattern_coverage: dict[str, int] = Field(default_factory=dict)
    top_candidates: list[ComponentAnalysis] = Field(default_factory=list)
    needs_manual: list[ComponentAnalysis] = Field(default_factory=list)

    @classmethod
    def from_analyses(
        cls, analyses: list[ComponentAnalysis], top_n: int = 10
    ) -> "AnalysisSummary":
        categories: dict[str, int] = {}
        complexity_breakdown = {c.value: 0 for c in Complexity}
        risk_breakdown = {r.value: 0 for r in RiskLevel}
        pattern_coverage: dict[str, int] = {}

        for analysis in analyses:
            categories[analysis.category] = categories.get(analysis.category, 0) + 1
            complexity_breakdown[analysis.complexity.value] += 1
            risk_breakdown[analysis.risk_level.value] += 1
            for pattern in analysis.estimated_patterns:
                pattern_coverage[pattern] = pattern_coverage.get(pattern, 0) + 1

        # Easiest first: ready, simple, low risk, fewest dark classes
        top_candidates = sorted(
            (
                a
                for a in analyses
                if a.automation_ready
                and a.complexity is Complexity.SIMPLE
                and a.risk_level is RiskLevel.LOW
            ),
            key=lambda a: a.dark_class_count,
        )[:top_n]

        needs_manual = sorted(
            (a for a in analyses if not a.automation_ready or a.risk_level is RiskLevel.HIGH),
            key=lambda a: a.dark_class_count,
            reverse=True,
        )

        return cls(
            total_components=len(analyses),
            automation_ready=sum(1 for a in analyses if a.automation_ready),
            categories=categories,
            complexity_breakdown=complexity_breakdown,
            risk_breakdown=risk_breakdown,
            pattern_coverage=pattern_coverage,
            top_candidates=top_candidates,
            needs_manual=needs_manual,
        )
