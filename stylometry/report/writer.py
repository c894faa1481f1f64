"""Persistence of feature reports."""

import json
from pathlib import Path
from typing import Dict

from ..utils.logging import get_logger
from .assembler import FeatureReport, render_summary

logger = get_logger(__name__)

JSON_FILENAME = "result.json"
TEXT_FILENAME = "result.txt"


def write_report(
    report: FeatureReport,
    output_dir: str,
    write_text: bool = False
) -> Dict[str, Path]:
    """Write the report as JSON, and optionally as a text summary.

    Args:
        report: Assembled report.
        output_dir: Directory to write into; created if missing.
        write_text: Also write the plain-text summary.

    Returns:
        Mapping of format ("json", "text") to written path.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    written = {}
    json_path = directory / JSON_FILENAME
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    written["json"] = json_path

    if write_text:
        text_path = directory / TEXT_FILENAME
        text_path.write_text(render_summary(report), encoding="utf-8")
        written["text"] = text_path

    for fmt, path in written.items():
        logger.info(f"Wrote {fmt} report to {path}")
    return written
