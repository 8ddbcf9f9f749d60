"""Pattern Table: ordered color substitution rules and analyzer heuristics.

Each substitution rule pairs a regular expression with a literal replacement and
a category label ("surface", "border", "text", ...). Rules are applied in
declaration order. When two rules can match overlapping text, the rule declared
first wins: it rewrites the text before the later rule is tried, so the later
rule only sees what is left.

The heuristic patterns are used by the component analyzer to guess which
pattern groups a file would need without rewriting it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
from re import Pattern

from loguru import logger
import yaml

from themeshift.utils import expand_file_path


@dataclass(frozen=True)
class PatternEntry:
    """One substitution rule: matcher -> literal replacement."""

    category: str
    matcher: Pattern
    replacement: str

    @property
    def source(self) -> str:
        return self.matcher.pattern

    def apply(self, text: str) -> tuple[str, int]:
        """Replace every occurrence of the matcher in text.

        Returns:
            Tuple of (new text, number of replacements)
        """
        # Lambda keeps the replacement literal (no backreference expansion)
        return self.matcher.subn(lambda _match: self.replacement, text)


@dataclass(frozen=True)
class HeuristicPattern:
    """Analyzer-only signal for a pattern group likely to apply to a file."""

    label: str
    matcher: Pattern
    safe: bool = False
    review_note: str | None = None

    def detect(self, text: str) -> bool:
        return self.matcher.search(text) is not None


@dataclass(frozen=True)
class PatternTable:
    """Immutable, ordered collection of substitution rules and heuristics."""

    entries: tuple[PatternEntry, ...]
    heuristics: tuple[HeuristicPattern, ...] = field(default_factory=tuple)

    @property
    def categories(self) -> list[str]:
        """Category labels in first-declared order."""
        seen: list[str] = []
        for entry in self.entries:
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    @property
    def replacements(self) -> list[str]:
        """Distinct replacement tokens in first-declared order."""
        seen: list[str] = []
        for entry in self.entries:
            if entry.replacement not in seen:
                seen.append(entry.replacement)
        return seen

    def entries_for(self, category: str | None = None) -> list[PatternEntry]:
        """Return entries in declaration order, optionally restricted to one category."""
        if category is None:
            return list(self.entries)
        return [entry for entry in self.entries if entry.category == category]

    def validate(self) -> None:
        """Check the table for rules that would make migration unsafe.

        Raises:
            ValueError: If the table is empty, a matcher is declared twice, or a
                matcher matches one of the table's own replacement tokens
                (which would break idempotence).
        """
        if not self.entries:
            raise ValueError("Pattern table contains no entries")

        seen_sources: dict[str, str] = {}
        for entry in self.entries:
            if entry.source in seen_sources:
                raise ValueError(
                    f"Duplicate matcher '{entry.source}' in categories "
                    f"'{seen_sources[entry.source]}' and '{entry.category}'"
                )
            seen_sources[entry.source] = entry.category

        for entry in self.entries:
            for replacement in self.replacements:
                if entry.matcher.search(replacement):
                    raise ValueError(
                        f"Matcher '{entry.source}' ({entry.category}) matches replacement "
                        f"'{replacement}'; migrated text would be rewritten again"
                    )


def _entries(category: str, rules: list[tuple[str, str]]) -> list[PatternEntry]:
    return [
        PatternEntry(category, re.compile(source), replacement) for source, replacement in rules
    ]


# Surface colors
_SURFACE_RULES = [
    (r"dark:bg-gray-800\s+bg-white", "bg-surface"),
    (r"dark:bg-gray-900\s+bg-white", "bg-surface"),
    (r"dark:bg-gray-950\s+bg-white", "bg-surface"),
    (r"dark:bg-slate-800\s+bg-white", "bg-surface"),
    (r"dark:bg-slate-900\s+bg-white", "bg-surface"),
    (r"dark:bg-zinc-800\s+bg-white", "bg-surface"),
    (r"dark:bg-zinc-900\s+bg-white", "bg-surface"),
    (r"bg-white\s+dark:bg-gray-800", "bg-surface"),
    (r"bg-white\s+dark:bg-gray-900", "bg-surface"),
    (r"bg-white\s+dark:bg-gray-950", "bg-surface"),
    # Popovers and dialogs
    (r"dark:bg-gray-800\s+bg-gray-50", "bg-popover"),
    (r"dark:bg-gray-900\s+bg-gray-50", "bg-popover"),
    # Muted backgrounds
    (r"dark:bg-gray-700\s+bg-gray-100", "bg-muted"),
    (r"dark:bg-gray-800\s+bg-gray-100", "bg-muted"),
]

# Border colors
_BORDER_RULES = [
    (r"dark:border-gray-700\s+border-gray-200", "border-surface-border"),
    (r"dark:border-gray-600\s+border-gray-200", "border-surface-border"),
    (r"dark:border-gray-700\s+border-gray-300", "border-surface-border"),
    (r"dark:border-slate-700\s+border-slate-200", "border-surface-border"),
    (r"dark:border-zinc-700\s+border-zinc-200", "border-surface-border"),
    (r"border-gray-200\s+dark:border-gray-700", "border-surface-border"),
    (r"border-gray-300\s+dark:border-gray-700", "border-surface-border"),
    # Inputs and form fields
    (r"dark:border-gray-600\s+border-gray-300", "border-input"),
    (r"dark:border-gray-700\s+border-gray-400", "border-input"),
]

# Text colors
_TEXT_RULES = [
    (r"dark:text-white\s+text-gray-900", "text-surface-foreground"),
    (r"dark:text-gray-50\s+text-gray-900", "text-surface-foreground"),
    (r"dark:text-gray-100\s+text-gray-900", "text-surface-foreground"),
    (r"dark:text-slate-50\s+text-slate-900", "text-surface-foreground"),
    (r"dark:text-zinc-50\s+text-zinc-900", "text-surface-foreground"),
    (r"text-gray-900\s+dark:text-white", "text-surface-foreground"),
    (r"text-gray-900\s+dark:text-gray-50", "text-surface-foreground"),
    # Muted text
    (r"dark:text-gray-400\s+text-gray-600", "text-muted-foreground"),
    (r"dark:text-gray-300\s+text-gray-600", "text-muted-foreground"),
    (r"dark:text-gray-400\s+text-gray-500", "text-muted-foreground"),
    (r"text-gray-600\s+dark:text-gray-400", "text-muted-foreground"),
    (r"text-gray-500\s+dark:text-gray-400", "text-muted-foreground"),
]

_NEUTRALS = "(gray|slate|zinc|neutral|stone)"

DEFAULT_HEURISTICS: tuple[HeuristicPattern, ...] = (
    HeuristicPattern(
        "Pattern 1 (Surface)",
        re.compile(rf"dark:bg-{_NEUTRALS}-(800|900|950)\s+bg-(white|gray-50)"),
        safe=True,
    ),
    HeuristicPattern(
        "Pattern 2 (Border)",
        re.compile(rf"dark:border-{_NEUTRALS}-(600|700)\s+border-{_NEUTRALS}-(200|300)"),
        safe=True,
    ),
    HeuristicPattern(
        "Pattern 3 (Text)",
        re.compile(
            r"dark:text-(white|gray|slate|zinc|neutral|stone)-(50|100)\s+"
            rf"text-{_NEUTRALS}-(900|800)"
        ),
        safe=True,
    ),
    HeuristicPattern(
        "Pattern 5 (Status)",
        re.compile(r"getStatusClasses|STATUS_COLORS"),
        review_note="Uses status patterns - verify semantic mapping",
    ),
    HeuristicPattern(
        "Pattern 9 (Forms)",
        re.compile(r"border\s+border-border|focus:ring-ring"),
    ),
    HeuristicPattern(
        "Pattern 11 (Overlay)",
        re.compile(r"bg-popover|data-radix-popper"),
        review_note="Overlay component - verify popover tokens",
    ),
)


def default_pattern_table() -> PatternTable:
    """Build the built-in table (surface, border, text)."""
    return PatternTable(
        entries=tuple(
            _entries("surface", _SURFACE_RULES)
            + _entries("border", _BORDER_RULES)
            + _entries("text", _TEXT_RULES)
        ),
        heuristics=DEFAULT_HEURISTICS,
    )


def _parse_pattern_document(document, source_name: str) -> list[PatternEntry]:
    """Turn a loaded YAML document into pattern entries."""
    if not isinstance(document, dict) or not isinstance(document.get("categories"), dict):
        raise ValueError(f"{source_name}: expected a top-level 'categories' mapping")

    entries: list[PatternEntry] = []
    for category, rules in document["categories"].items():
        if not rules:
            raise ValueError(f"{source_name}: category '{category}' has no rules")
        for index, rule in enumerate(rules):
            if not isinstance(rule, dict) or "from" not in rule or "to" not in rule:
                raise ValueError(
                    f"{source_name}: rule {index} in '{category}' needs 'from' and 'to' keys"
                )
            try:
                matcher = re.compile(str(rule["from"]))
            except re.error as e:
                raise ValueError(
                    f"{source_name}: invalid regex '{rule['from']}' in '{category}': {e}"
                ) from e
            entries.append(PatternEntry(str(category), matcher, str(rule["to"])))
    return entries


def load_pattern_table(pattern_file: str | Path | None = None) -> PatternTable:
    """Load the pattern table from a YAML file, or return the built-in table.

    The file format is::

        categories:
          surface:
            - from: 'dark:bg-gray-800\\s+bg-white'
              to: bg-surface

    Heuristic patterns always come from the built-in set.

    Raises:
        ValueError: If the file is malformed or the table fails validation
    """
    if pattern_file is None:
        table = default_pattern_table()
    else:
        path = expand_file_path(str(pattern_file)) or str(pattern_file)
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except FileNotFoundError:
            logger.error(f"✗ Pattern file not found: {path}")
            logger.error("  Please check the file path and try again")
            raise
        except yaml.YAMLError as e:
            logger.error(f"✗ Invalid YAML in pattern file {path}: {e}")
            raise ValueError(f"Invalid pattern file: {e}") from e

        try:
            entries = _parse_pattern_document(document, path)
        except ValueError as e:
            logger.error(f"✗ {e}")
            raise
        table = PatternTable(entries=tuple(entries), heuristics=DEFAULT_HEURISTICS)
        logger.info(f"  Loaded {len(entries)} patterns from {path}")

    try:
        table.validate()
    except ValueError as e:
        logger.error(f"✗ Pattern table validation failed: {e}")
        raise
    return table
