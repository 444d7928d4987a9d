"""Filtering, escaping and grouping shared by the writers."""

from .text_transform import OutputFormat, EscapeRule, transform_text
from .filters import is_android_term
from .sections import SectionState, fold_sections

__all__ = [
    "OutputFormat",
    "EscapeRule",
    "transform_text",
    "is_android_term",
    "SectionState",
    "fold_sections",
]
