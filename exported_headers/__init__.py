"""exported-headers: collect a canonical inventory of public header files."""

__version__ = "0.1.0"

from exported_headers.core import (
    collect_all_exported_headers,
    get_cwd,
    normalize_path,
)

__all__ = [
    "__version__",
    "collect_all_exported_headers",
    "get_cwd",
    "normalize_path",
]
