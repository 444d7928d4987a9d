"""Data models for the export pipeline."""

from .term import SingleText, PluralText, Definition, TermRecord
from .export_stats import ExportStats

__all__ = [
    "SingleText",
    "PluralText",
    "Definition",
    "TermRecord",
    "ExportStats",
]
