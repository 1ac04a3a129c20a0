import json
import sys
from typing import Iterable
import structlog

from exported_headers.core.header_set import ExportedHeaderSet

log = structlog.get_logger(__name__)

def render_text(exported_headers: Iterable[str]) -> str:
    # one path per line, in set order.
    lines = list(exported_headers)
    return "\n".join(lines) + "\n" if lines else ""

def render_json(exported_headers: ExportedHeaderSet, root_dir: str) -> str:
    payload = {
        "root_dir": root_dir,
        "count": len(exported_headers),
        "exported_headers": list(exported_headers),
    }
    return json.dumps(payload, indent=2) + "\n"

def write_to_stdout(text_content: str):
    # writes text to standard output.
    try:
        sys.stdout.write(text_content)
        sys.stdout.flush()
    except UnicodeEncodeError as e:
        log.warning("stdout_write_failed_trying_binary_fallback", error=str(e))
        sys.stdout.buffer.write(text_content.encode("utf-8", errors="surrogateescape"))
        sys.stdout.buffer.flush()
