from .validator import validate_wordfile, pretty_summary
from .io import read_lines, write_lines, write_report
from .coverage import Coverage, selection_coverage

__all__ = [
    "validate_wordfile", "pretty_summary", "read_lines", "write_lines", "write_report",
    "Coverage", "selection_coverage",
]
