"""Renumbering of exercise and solution headings in markdown manuscripts."""

from .renumber import (
    RenumberResult,
    find_section,
    is_section_opener,
    renumber,
    renumber_lines,
    renumber_ordinals,
    renumber_with_report,
)
from .manuscript import FormatResult, format_manuscript
from .config_loader import load_formatter_config

__all__ = [
    "RenumberResult",
    "FormatResult",
    "find_section",
    "format_manuscript",
    "is_section_opener",
    "load_formatter_config",
    "renumber",
    "renumber_lines",
    "renumber_ordinals",
    "renumber_with_report",
]
