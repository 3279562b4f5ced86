"""JSON lines output sink."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from compat_utils import get_logger

log = get_logger("tasks.output")


def write_records(records: Iterable[dict[str, Any]], path: Path | None = None) -> int:
    """Write one JSON document per line to path, or stdout when path is None.

    Returns:
        Number of records written.
    """
    lines = [json.dumps(record, ensure_ascii=False) for record in records]
    payload = "".join(f"{line}\n" for line in lines)

    if path is None:
        sys.stdout.write(payload)
        sys.stdout.flush()
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")

    log.info("records_written", count=len(lines), path=str(path) if path else "stdout")
    return len(lines)
