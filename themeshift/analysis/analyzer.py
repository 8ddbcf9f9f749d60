"""Component analyzer: assesses complexity and automation readiness."""

import os
from pathlib import Path

from loguru import logger
from tqdm import tqdm

from themeshift.analysis.models import AnalysisSummary, ComponentAnalysis
from themeshift.analysis.scoring import (
    assess_automation_readiness,
    calculate_complexity,
    calculate_risk_level,
    categorize_component,
    estimate_patterns,
    extract_signals,
)
from themeshift.core import Config, PatternTable
from themeshift.data.files import discover_files


class ComponentAnalyzer:
    """Scan component files and classify them without modifying anything."""

    def __init__(self, table: PatternTable, config: Config | None = None):
        self.table = table
        self.config = config or Config()
        self._results: list[ComponentAnalysis] = []
        self._skipped: list[Path] = []

    @property
    def results(self) -> list[ComponentAnalysis]:
        return list(self._results)

    @property
    def skipped(self) -> list[Path]:
        """Files that could not be read during analyze_path."""
        return list(self._skipped)

    def analyze_content(
        self, content: str, file_path: str | Path, base_dir: str | Path
    ) -> ComponentAnalysis:
        """Classify already-loaded file content. Pure given its arguments."""
        scoring = self.config.scoring
        base = Path(base_dir)
        relative_path = Path(os.path.relpath(file_path, base)).as_posix()
        # Category markers look like 'components/ui/', so keep the base dir's own name
        scoped_path = f"{base.resolve().name}/{relative_path}"
        category = categorize_component(scoped_path, scoring.known_categories)

        signals = extract_signals(content)
        estimated = estimate_patterns(content, self.table.heuristics)
        complexity = calculate_complexity(signals, scoring)
        risk_level = calculate_risk_level(complexity, signals, category, scoring)
        ready, notes = assess_automation_readiness(
            complexity, signals, estimated, self.table.heuristics, scoring
        )

        return ComponentAnalysis(
            file=str(file_path),
            relative_path=relative_path,
            category=category,
            complexity=complexity,
            dark_classes=list(signals.dark_classes),
            dark_class_count=signals.dark_class_count,
            has_animations=signals.has_animations,
            has_variants=signals.has_variants,
            has_business_logic=signals.has_business_logic,
            has_custom_colors=signals.has_custom_colors,
            estimated_patterns=estimated,
            automation_ready=ready,
            automation_notes=notes,
            risk_level=risk_level,
        )

    def analyze_file(self, file_path: str | Path, base_dir: str | Path) -> ComponentAnalysis:
        """Read and classify one file, recording the analysis.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not UTF-8
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading {file_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise
        except OSError as e:
            logger.error(f"✗ Error reading {file_path}: {e}")
            raise

        analysis = self.analyze_content(content, file_path, base_dir)
        logger.debug(
            f"  {analysis.relative_path}: {analysis.complexity.value}, "
            f"risk {analysis.risk_level.value}, ready={analysis.automation_ready}"
        )
        self._results.append(analysis)
        return analysis

    def analyze_path(self, target: str | Path) -> AnalysisSummary:
        """Analyze a file or every candidate component under a directory.

        Files that cannot be read or decoded are skipped with a warning and
        listed in ``skipped``; the rest of the run continues.

        Raises:
            InvalidTargetError: If target is missing or not a file/directory
        """
        target_path = Path(target)
        files = discover_files(target_path, self.config.analyze_files)
        base_dir = target_path if target_path.is_dir() else target_path.parent

        logger.info(f"Analyzing {len(files)} components in {target_path}...")
        files_iter = files
        if self.config.verbose:
            files_iter = tqdm(files, desc="Analyzing components", unit="file")

        for path in files_iter:
            try:
                self.analyze_file(path, base_dir)
            except (OSError, UnicodeDecodeError):
                logger.warning(f"⏭ Skipping unreadable component: {path}")
                self._skipped.append(Path(path))

        return self.summarize()

    def summarize(self) -> AnalysisSummary:
        return AnalysisSummary.from_analyses(self._results, self.config.scoring.top_candidates)
