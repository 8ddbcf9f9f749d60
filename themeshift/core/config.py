"""Configuration management for themeshift."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from themeshift.utils import Constants, read_json_file


class FileFilter(BaseModel):
    """Which files a tool picks up when walking a directory."""

    extensions: list[str] = Field(default_factory=lambda: list(Constants.MIGRATE_EXTENSIONS))
    exclude_dirs: list[str] = Field(default_factory=lambda: list(Constants.EXCLUDED_DIRS))
    exclude_markers: list[str] = Field(
        default_factory=lambda: list(Constants.EXCLUDED_NAME_MARKERS),
        description="Substrings that exclude a file by name (e.g. '.test.')",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lowercase extensions and make sure each starts with a dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]


class ScoringConfig(BaseModel):
    """Weights and thresholds for the component analyzer heuristics."""

    # Tier points from the number of unique dark: classes
    few_dark_classes: int = Field(3, ge=1, description="Upper bound of the lowest tier")
    some_dark_classes: int = Field(10, ge=1, description="Upper bound of the middle tier")
    few_points: int = Field(1, ge=0)
    some_points: int = Field(2, ge=0)
    many_points: int = Field(3, ge=0)

    # Secondary signals
    animation_points: int = Field(2, ge=0)
    variant_points: int = Field(2, ge=0)
    business_logic_points: int = Field(1, ge=0)
    custom_color_points: int = Field(1, ge=0)

    # Score -> tier
    simple_max_score: int = Field(2, ge=0)
    medium_max_score: int = Field(5, ge=0)

    # Readiness and risk
    many_dark_classes: int = Field(
        10, ge=0, description="Variant components above this count need manual review"
    )
    high_risk_categories: list[str] = Field(default_factory=lambda: ["auth", "data", "resume"])
    known_categories: list[str] = Field(
        default_factory=lambda: [
            "ui",
            "display",
            "form",
            "interactive",
            "layout",
            "data",
            "auth",
            "resume",
        ]
    )
    top_candidates: int = Field(10, ge=1, description="Length of the top candidates list")

    @model_validator(mode="after")
    def validate_thresholds(self):
        """Validate that tier boundaries are ordered."""
        if self.some_dark_classes <= self.few_dark_classes:
            raise ValueError(
                f"some_dark_classes ({self.some_dark_classes}) must be > "
                f"few_dark_classes ({self.few_dark_classes})"
            )
        if self.medium_max_score <= self.simple_max_score:
            raise ValueError(
                f"medium_max_score ({self.medium_max_score}) must be > "
                f"simple_max_score ({self.simple_max_score})"
            )
        return self


class Config(BaseModel):
    """Configuration shared by the migration tools."""

    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    # Color migration
    dry_run: bool = False
    category: str | None = Field(None, description="Restrict migration to one category")
    pattern_file: str | None = Field(None, description="YAML pattern table")
    import_line: str = Constants.HELPER_IMPORT_LINE
    import_source: str = Constants.HELPER_IMPORT_SOURCE
    marker_tokens: list[str] = Field(default_factory=lambda: list(Constants.SEMANTIC_TOKENS))
    migrate_files: FileFilter = Field(default_factory=FileFilter)

    # Analysis
    analyze_files: FileFilter = Field(
        default_factory=lambda: FileFilter(
            extensions=list(Constants.ANALYZE_EXTENSIONS),
            exclude_markers=list(Constants.ANALYZE_EXCLUDED_NAME_MARKERS),
        )
    )
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    # Shared output
    export: str | None = Field(None, description="JSON export path")

    # Documentation
    docs_dir: str = Constants.DEFAULT_DOCS_DIR
    manual_baseline_minutes: float = Field(Constants.MANUAL_BASELINE_MINUTES, gt=0)

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        """Treat 'all' and empty values as no category filter."""
        if v is None or v == "" or v == "all":
            return None
        return v


def load_config(json_path: str | None, cli_args: Namespace, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object.

    Priority: CLI (when it differs from the parser default) > JSON > model default.
    Only CLI arguments named like a Config field are considered.
    """
    json_config: dict = {}
    if json_path:
        loaded = read_json_file(json_path, "config file")
        if not isinstance(loaded, dict):
            logger.error(f"✗ Config file {json_path} must contain a JSON object")
            raise ValueError("Invalid JSON configuration: expected an object")
        json_config = loaded

    config_dict = dict(json_config)
    for key, cli_value in vars(cli_args).items():
        if key not in Config.model_fields:
            continue
        # Use CLI value only if it was explicitly set by the user
        if cli_value != parser.get_default(key):
            config_dict[key] = cli_value

    config_dict["verbose"] = bool(
        getattr(cli_args, "verbose", False) or json_config.get("verbose", False)
    )
    config_dict["debug"] = bool(
        getattr(cli_args, "debug", False) or json_config.get("debug", False)
    )

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
