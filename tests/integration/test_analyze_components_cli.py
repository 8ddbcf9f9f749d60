"""Integration tests for the analyze-components command."""

import json
import re

from themeshift.cli.analyze import main

SIMPLE = '<div className="dark:bg-gray-800 bg-white">ok</div>\n'
CUSTOM = '<div className="dark:bg-gray-800 bg-white" style={{ color: "#FF0000" }}>x</div>\n'


def _tree(tmp_path):
    root = tmp_path / "components"
    (root / "ui").mkdir(parents=True)
    (root / "ui" / "badge.tsx").write_text(SIMPLE, encoding="utf-8")
    (root / "ui" / "swatch.tsx").write_text(CUSTOM, encoding="utf-8")
    return root


class TestAnalyzeComponents:
    """Verify the analysis report and export."""

    def test_prints_report(self, tmp_path, capsys) -> None:
        """When run on a directory, the report header is printed."""
        main([str(_tree(tmp_path))])
        assert "COMPONENT ANALYSIS REPORT" in capsys.readouterr().out

    def test_exits_zero(self, tmp_path) -> None:
        """When the analysis completes, the exit code is 0."""
        assert main([str(_tree(tmp_path))]) == 0

    def test_custom_color_component_not_ready(self, tmp_path) -> None:
        """When a component uses a literal color, the export marks it not ready."""
        output = tmp_path / "analysis.json"
        main(["--export", str(output), str(_tree(tmp_path))])
        components = json.loads(output.read_text(encoding="utf-8"))["components"]
        swatch = next(c for c in components if c["relativePath"] == "ui/swatch.tsx")
        assert swatch["automationReady"] is False

    def test_export_counts_ready_components(self, tmp_path) -> None:
        """When one of two components is ready, the export summary says one."""
        output = tmp_path / "analysis.json"
        main(["--export", str(output), str(_tree(tmp_path))])
        assert json.loads(output.read_text(encoding="utf-8"))["summary"]["automationReady"] == 1

    def test_missing_target_exits_one(self, tmp_path) -> None:
        """When the directory does not exist, the exit code is 1."""
        assert main([str(tmp_path / "missing")]) == 1


def _report_count(report: str, label: str) -> int:
    return int(re.search(rf"^\s*{label}: (\d+)", report, re.MULTILINE).group(1))


class TestReportMatchesExport:
    """Verify the printed report and the JSON export agree on totals."""

    def _run(self, tmp_path, capsys) -> tuple[str, dict]:
        root = _tree(tmp_path)
        (root / "auth").mkdir()
        (root / "auth" / "login.tsx").write_text(SIMPLE, encoding="utf-8")
        output = tmp_path / "analysis.json"
        main(["--export", str(output), str(root)])
        summary = json.loads(output.read_text(encoding="utf-8"))["summary"]
        return capsys.readouterr().out, summary

    def test_total_components_match(self, tmp_path, capsys) -> None:
        """When exported, the total equals the printed total."""
        report, summary = self._run(tmp_path, capsys)
        assert _report_count(report, "Total components") == summary["totalComponents"]

    def test_automation_ready_match(self, tmp_path, capsys) -> None:
        """When exported, the ready count equals the printed ready count."""
        report, summary = self._run(tmp_path, capsys)
        assert _report_count(report, "Automation ready") == summary["automationReady"]

    def test_needs_manual_match(self, tmp_path, capsys) -> None:
        """When exported, the manual list length equals the printed manual count."""
        report, summary = self._run(tmp_path, capsys)
        assert _report_count(report, "Needs manual") == len(summary["needsManual"])


class TestUnreadableComponent:
    """Verify one unreadable file does not abort the run."""

    def test_still_prints_report(self, tmp_path, capsys) -> None:
        """When a component is not UTF-8, the report is printed for the rest."""
        root = _tree(tmp_path)
        (root / "ui" / "broken.tsx").write_bytes(b"\xff\xfe\x00")
        main([str(root)])
        assert "Total components: 2" in capsys.readouterr().out

    def test_exits_zero(self, tmp_path) -> None:
        """When a component is not UTF-8, the exit code is still 0."""
        root = _tree(tmp_path)
        (root / "ui" / "broken.tsx").write_bytes(b"\xff\xfe\x00")
        assert main([str(root)]) == 0
