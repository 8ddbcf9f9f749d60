"""Load migration results and component analyses written by the other tools."""

from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from themeshift.analysis.models import ComponentAnalysis
from themeshift.migration.results import MigrationResult
from themeshift.utils import Constants, read_json_file

# Component file extensions that sidecar JSON files are named after
_SOURCE_SUFFIXES = (".ts", ".tsx", ".js", ".jsx")


def _parse_time_taken(value, results_path: str | Path) -> float:
    """Return timeTaken as minutes.

    Raises:
        ValueError: If the value is not a non-negative number
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0:
        return float(value)
    logger.error(f"✗ Invalid timeTaken in {results_path}: {value!r}")
    logger.error("  timeTaken must be a non-negative number of minutes")
    raise ValueError(f"Invalid timeTaken in {results_path}: {value!r}")


def load_batch_results(results_path: str | Path) -> tuple[list[MigrationResult], float]:
    """Read a batch results file.

    Accepts either a bare JSON array of results or an object with a ``results``
    array and an optional ``timeTaken`` in minutes.

    Returns:
        Tuple of (results, time taken in minutes)

    Raises:
        ValueError: If the file is not valid JSON or the records are malformed
    """
    document = read_json_file(results_path, "batch results file")

    time_taken = float(Constants.DEFAULT_BATCH_TIME_MINUTES)
    if isinstance(document, dict):
        records = document.get("results")
        if "timeTaken" in document:
            time_taken = _parse_time_taken(document["timeTaken"], results_path)
    else:
        records = document

    if not isinstance(records, list):
        logger.error(f"✗ Batch results file {results_path} has no results array")
        raise ValueError(f"Malformed batch results file: {results_path}")

    try:
        results = [MigrationResult.model_validate(record) for record in records]
    except ValidationError as e:
        logger.error(f"✗ Malformed migration result in {results_path}: {e}")
        raise ValueError(f"Malformed batch results file: {results_path}") from e
    return results, time_taken


def load_migration_result(result_path: str | Path) -> MigrationResult:
    """Read a single migration result.

    Raises:
        ValueError: If the file is not valid JSON or not a migration result
    """
    document = read_json_file(result_path, "migration result file")
    try:
        return MigrationResult.model_validate(document)
    except ValidationError as e:
        logger.error(f"✗ Malformed migration result in {result_path}: {e}")
        raise ValueError(f"Malformed migration result file: {result_path}") from e


def _matches_component(record: dict, component_path: str | Path) -> bool:
    wanted = Path(component_path).as_posix()
    for key in ("file", "relativePath", "relative_path"):
        value = record.get(key)
        if not isinstance(value, str) or not value:
            continue
        candidate = Path(value).as_posix()
        if candidate == wanted or wanted.endswith(candidate):
            return True
    return False


def load_component_analysis(
    analysis_path: str | Path, component_path: str | Path
) -> ComponentAnalysis | None:
    """Read the analysis for component_path.

    The file is either one component record or a full analyzer export, in which
    case the component is looked up by path. Returns None when an export does
    not mention the component.

    Raises:
        ValueError: If the file is not valid JSON or the record is malformed
    """
    document = read_json_file(analysis_path, "component analysis file")
    record = document
    if isinstance(document, dict) and isinstance(document.get("components"), list):
        if not all(isinstance(c, dict) for c in document["components"]):
            logger.error(f"✗ Malformed analysis export {analysis_path}")
            logger.error("  Every entry in 'components' must be a JSON object")
            raise ValueError(f"Malformed component analysis file: {analysis_path}")
        record = next(
            (c for c in document["components"] if _matches_component(c, component_path)), None
        )
        if record is None:
            logger.warning(f"  {component_path} not found in analysis export {analysis_path}")
            return None

    try:
        return ComponentAnalysis.model_validate(record)
    except ValidationError as e:
        logger.error(f"✗ Malformed component analysis in {analysis_path}: {e}")
        raise ValueError(f"Malformed component analysis file: {analysis_path}") from e


def sidecar_path(component_path: str | Path, kind: str) -> Path:
    """Return '<stem>-<kind>.json' next to a component file."""
    path = Path(component_path)
    if path.suffix in _SOURCE_SUFFIXES:
        return path.with_name(f"{path.stem}-{kind}.json")
    return path.with_name(f"{path.name}-{kind}.json")
