"""Which terms make it into which file."""

from typing import Optional

from ..models.term import TermRecord

ANDROID_SUFFIX = "_android"


def is_android_term(term: Optional[str]) -> bool:
    """Android-specific keys never go into the Apple files."""
    return bool(term) and term.endswith(ANDROID_SUFFIX)


def has_strings_value(record: TermRecord) -> bool:
    return bool(record.term) and bool(record.singular_text())


def has_plural_value(record: TermRecord) -> bool:
    """Only a missing definition or an empty plural mapping counts as empty.

    Plain-string definitions pass and are skipped later without being counted.
    """
    if not record.term or record.definition is None:
        return False
    forms = record.plural_forms()
    return forms is None or bool(forms)


def has_context(record: TermRecord) -> bool:
    return bool(record.term) and bool(record.context)
