import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
import structlog

from exported_headers.core.paths import get_cwd

log = structlog.get_logger(__name__)

class OutputFormat(Enum):
    # how the collected header inventory is printed.
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional["OutputFormat"]:
        if not s:
            return None
        try:
            return cls(s.lower())
        except ValueError:
            log.warning("invalid_output_format_string", input_string=s)
            return None

DEFAULT_OUTPUT_FORMAT = OutputFormat.TEXT
DEFAULT_SHOW_SUMMARY = False

@dataclass
class CollectorConfig:
    # holds all configuration parameters for a single collection run.
    header_dirs: List[Path] = field(default_factory=list)
    root_dir: Optional[Path] = None
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    show_summary: bool = DEFAULT_SHOW_SUMMARY

    # fixed for the whole run, never recomputed per file.
    resolved_root_dir: str = field(init=False)

    def __post_init__(self):
        cwd = get_cwd()
        if self.root_dir is None:
            self.resolved_root_dir = cwd
        else:
            self.resolved_root_dir = os.path.normpath(os.path.join(cwd, os.fspath(self.root_dir)))
