"""src/sidetag/features/tagging/usecases/report.py
What: Persist the run summary as JSON.
Why: Leave a record of which files were tagged, skipped or failed.
"""

from __future__ import annotations

import json
from pathlib import Path

from .processing_types import RunResults


def write_report(results: RunResults, report_path: Path) -> Path:
    """Write ``results`` to ``report_path`` as indented UTF-8 JSON, replacing any previous report."""

    payload = json.dumps(results.to_report(), indent=2, ensure_ascii=False)
    _ = report_path.write_text(payload, encoding="utf-8")
    return report_path


__all__ = ["write_report"]
