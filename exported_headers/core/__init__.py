from .discovery import collect_all_exported_headers
from .header_set import ExportedHeaderSet
from .paths import get_cwd, normalize_path

__all__ = ["ExportedHeaderSet", "collect_all_exported_headers", "get_cwd", "normalize_path"]
