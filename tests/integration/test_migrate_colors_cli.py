"""Integration tests for the migrate-colors command.

These tests run the command end to end against a temporary component tree and
check the printed summary, the exit code and the files on disk.
"""

import json

import pytest

from themeshift.cli.migrate import main

CARD = '<div className="dark:bg-gray-800 bg-white">card</div>\n'
LABEL = '<span className="dark:text-white text-gray-900">label</span>\n'
PLAIN = '<p className="p-4">plain</p>\n'


@pytest.fixture
def component_tree(tmp_path):
    """Five components, two of which contain known dark-mode pairs."""
    root = tmp_path / "components"
    (root / "ui").mkdir(parents=True)
    (root / "display").mkdir()
    (root / "ui" / "card.tsx").write_text(CARD, encoding="utf-8")
    (root / "ui" / "label.tsx").write_text(LABEL, encoding="utf-8")
    (root / "ui" / "spacer.tsx").write_text(PLAIN, encoding="utf-8")
    (root / "display" / "empty.tsx").write_text(PLAIN, encoding="utf-8")
    (root / "display" / "list.jsx").write_text(PLAIN, encoding="utf-8")
    return root


class TestMigrateDirectory:
    """Verify directory migration end to end."""

    def test_reports_two_successful_migrations(self, component_tree, capsys) -> None:
        """When two of five files match, the summary reports two successes."""
        main([str(component_tree)])
        assert "Successful migrations: 2" in capsys.readouterr().out

    def test_reports_five_processed_files(self, component_tree, capsys) -> None:
        """When five files are found, all five are processed."""
        main([str(component_tree)])
        assert "Total files processed: 5" in capsys.readouterr().out

    def test_exits_zero_on_success(self, component_tree) -> None:
        """When every file succeeds, the exit code is 0."""
        assert main([str(component_tree)]) == 0

    def test_rewrites_matching_file(self, component_tree) -> None:
        """When a file matches, it is rewritten on disk."""
        main([str(component_tree)])
        card = (component_tree / "ui" / "card.tsx").read_text(encoding="utf-8")
        assert card == '<div className="bg-surface">card</div>\n'

    def test_pattern_option_limits_categories(self, component_tree) -> None:
        """When only surface patterns are requested, text pairs are kept."""
        main(["--pattern", "surface", str(component_tree)])
        assert (component_tree / "ui" / "label.tsx").read_text(encoding="utf-8") == LABEL

    def test_dry_run_writes_nothing(self, component_tree) -> None:
        """When run with --dry-run, no file content changes."""
        main(["--dry-run", str(component_tree)])
        assert (component_tree / "ui" / "card.tsx").read_text(encoding="utf-8") == CARD

    def test_dry_run_reports_two_successful_migrations(self, component_tree, capsys) -> None:
        """When run with --dry-run, the would-be migrations are still counted."""
        main(["--dry-run", str(component_tree)])
        assert "Successful migrations: 2" in capsys.readouterr().out

    def test_dry_run_keeps_modification_times(self, component_tree) -> None:
        """When run with --dry-run, no file modification time changes."""
        files = sorted(component_tree.rglob("*.*sx"))
        before = [path.stat().st_mtime_ns for path in files]
        main(["--dry-run", str(component_tree)])
        assert [path.stat().st_mtime_ns for path in files] == before

    def test_export_writes_results(self, component_tree, tmp_path) -> None:
        """When --export is given, every processed file is in the JSON results."""
        output = tmp_path / "results.json"
        main(["--export", str(output), str(component_tree)])
        assert len(json.loads(output.read_text(encoding="utf-8"))["results"]) == 5


class TestMigrateErrors:
    """Verify failure exit codes."""

    def test_missing_target_exits_one(self, tmp_path) -> None:
        """When the target does not exist, the exit code is 1."""
        assert main([str(tmp_path / "missing")]) == 1

    def test_missing_target_prints_no_summary(self, tmp_path, capsys) -> None:
        """When the target does not exist, no summary is printed."""
        main([str(tmp_path / "missing")])
        assert "MIGRATION SUMMARY" not in capsys.readouterr().out

    def test_no_target_exits_one(self) -> None:
        """When no target is given, the exit code is 1."""
        assert main([]) == 1

    def test_unreadable_file_exits_one(self, component_tree) -> None:
        """When one file cannot be decoded, the exit code is 1."""
        (component_tree / "ui" / "broken.tsx").write_bytes(b"\xff\xfe\x00")
        assert main([str(component_tree)]) == 1

    def test_unknown_pattern_is_usage_error(self, component_tree) -> None:
        """When the pattern category is unknown, argparse reports a usage error."""
        with pytest.raises(SystemExit):
            main(["--pattern", "shadows", str(component_tree)])
