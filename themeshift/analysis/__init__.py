"""Component analysis for themeshift."""

from themeshift.analysis.analyzer import ComponentAnalyzer
from themeshift.analysis.models import AnalysisSummary, ComponentAnalysis

__all__ = ["AnalysisSummary", "ComponentAnalysis", "ComponentAnalyzer"]
