"""Source file discovery for themeshift."""

from themeshift.data.files import InvalidTargetError, discover_files, is_candidate

__all__ = ["InvalidTargetError", "discover_files", "is_candidate"]
