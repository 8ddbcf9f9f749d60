"""Unit tests for configuration loading."""

import json

import pytest

from themeshift.cli.parser import create_analyze_parser, create_migrate_parser
from themeshift.core import Config, FileFilter, ScoringConfig, load_config


def _load(tmp_path, argv: list[str], json_config: dict | None = None, parser_factory=None):
    parser = (parser_factory or create_migrate_parser)()
    json_path = None
    if json_config is not None:
        json_path = tmp_path / "config.json"
        json_path.write_text(json.dumps(json_config), encoding="utf-8")
    args = parser.parse_args(argv)
    return load_config(str(json_path) if json_path else None, args, parser)


class TestLoadConfig:
    """Test CLI and JSON precedence."""

    def test_cli_overrides_json(self, tmp_path) -> None:
        """When both set the category, the CLI value wins."""
        config = _load(tmp_path, ["--pattern", "surface", "src"], {"category": "text"})
        assert config.category == "surface"

    def test_json_used_when_cli_is_default(self, tmp_path) -> None:
        """When the CLI leaves the category unset, the JSON value is used."""
        config = _load(tmp_path, ["src"], {"category": "border"})
        assert config.category == "border"

    def test_all_category_means_no_filter(self, tmp_path) -> None:
        """When the category is 'all', no category filter is applied."""
        assert _load(tmp_path, ["--pattern", "all", "src"]).category is None

    def test_verbose_from_json(self, tmp_path) -> None:
        """When JSON enables verbose, verbose is on without the CLI flag."""
        assert _load(tmp_path, ["src"], {"verbose": True}).verbose is True

    def test_nested_scoring_from_json(self, tmp_path) -> None:
        """When JSON sets scoring weights, they reach the scoring config."""
        config = _load(
            tmp_path,
            ["src"],
            {"scoring": {"animation_points": 4}},
            parser_factory=create_analyze_parser,
        )
        assert config.scoring.animation_points == 4

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """When the JSON file is malformed, ValueError is raised."""
        json_path = tmp_path / "config.json"
        json_path.write_text("{not json", encoding="utf-8")
        parser = create_migrate_parser()
        with pytest.raises(ValueError):
            load_config(str(json_path), parser.parse_args(["src"]), parser)

    def test_invalid_values_raise_value_error(self, tmp_path) -> None:
        """When JSON values fail validation, ValueError is raised."""
        with pytest.raises(ValueError):
            _load(tmp_path, ["src"], {"manual_baseline_minutes": 0})


class TestConfigModels:
    """Test model defaults and validators."""

    def test_analyze_filter_excludes_stories(self) -> None:
        """When defaults are used, analysis skips .stories. files."""
        assert ".stories." in Config().analyze_files.exclude_markers

    def test_extensions_are_normalized(self) -> None:
        """When extensions lack a dot or use capitals, they are normalized."""
        assert FileFilter(extensions=["TSX", ".Jsx"]).extensions == [".tsx", ".jsx"]

    def test_unordered_score_tiers_rejected(self) -> None:
        """When the medium tier is not above the simple tier, validation fails."""
        with pytest.raises(ValueError):
            ScoringConfig(simple_max_score=5, medium_max_score=5)
