"""Unit tests for candidate file discovery."""

import pytest

from themeshift.core import FileFilter
from themeshift.data import InvalidTargetError, discover_files


def _touch(path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("export {};\n", encoding="utf-8")


class TestDiscoverFiles:
    """Test directory walking and filtering."""

    def test_returns_single_file_target(self, tmp_path) -> None:
        """When the target is a file, it is the only result."""
        target = tmp_path / "button.tsx"
        _touch(target)
        assert discover_files(target, FileFilter()) == [target]

    def test_skips_excluded_directories(self, tmp_path) -> None:
        """When a file lives under node_modules, it is not returned."""
        _touch(tmp_path / "node_modules" / "lib" / "index.ts")
        _touch(tmp_path / "src" / "app.ts")
        assert discover_files(tmp_path, FileFilter()) == [tmp_path / "src" / "app.ts"]

    def test_skips_test_files(self, tmp_path) -> None:
        """When a file name contains '.test.', it is not returned."""
        _touch(tmp_path / "button.test.tsx")
        _touch(tmp_path / "button.tsx")
        assert discover_files(tmp_path, FileFilter()) == [tmp_path / "button.tsx"]

    def test_skips_other_extensions(self, tmp_path) -> None:
        """When a file has an unlisted extension, it is not returned."""
        _touch(tmp_path / "styles.css")
        assert discover_files(tmp_path, FileFilter()) == []

    def test_returns_files_in_sorted_order(self, tmp_path) -> None:
        """When several files exist, they are returned in a stable sorted order."""
        for name in ("c.ts", "a.ts", "b/z.ts", "b/a.ts"):
            _touch(tmp_path / name)
        found = [
            path.relative_to(tmp_path).as_posix()
            for path in discover_files(tmp_path, FileFilter())
        ]
        assert found == ["a.ts", "c.ts", "b/a.ts", "b/z.ts"]

    def test_honors_custom_extensions(self, tmp_path) -> None:
        """When the filter lists only .jsx, .tsx files are ignored."""
        _touch(tmp_path / "a.tsx")
        _touch(tmp_path / "b.jsx")
        assert discover_files(tmp_path, FileFilter(extensions=["jsx"])) == [tmp_path / "b.jsx"]

    def test_missing_target_raises(self, tmp_path) -> None:
        """When the target does not exist, InvalidTargetError is raised."""
        with pytest.raises(InvalidTargetError):
            discover_files(tmp_path / "missing", FileFilter())
