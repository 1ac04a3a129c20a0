"""
Prints a collection summary to stderr during CLI execution.
"""
from typing import Sequence
from pathlib import Path

from rich.console import Console as RichConsole
from rich.table import Table
import structlog

from exported_headers.core.header_set import ExportedHeaderSet

log = structlog.get_logger(__name__)

def print_collection_summary(header_dirs: Sequence[Path], root_dir: str, exported_headers: ExportedHeaderSet, console: RichConsole = None):
    log.debug("console_summary_output_requested")
    console = console or RichConsole(stderr=True)

    table = Table(title="Exported Header Summary", show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")
    table.add_row("root directory", root_dir)
    table.add_row("header directories", "\n".join(str(d) for d in header_dirs))
    table.add_row("exported headers", f"{len(exported_headers):,}")
    outside_root = sum(1 for p in exported_headers if Path(p).is_absolute())
    if outside_root:
        table.add_row("outside root", f"[yellow]{outside_root:,}[/yellow]")
    console.print(table)
