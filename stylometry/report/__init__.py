"""Report assembly and persistence."""

from .assembler import FeatureReport, assemble_report, render_summary
from .writer import write_report

__all__ = [
    "FeatureReport",
    "assemble_report",
    "render_summary",
    "write_report",
]
