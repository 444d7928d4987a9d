"""Shared fixtures for the export tests."""

from datetime import datetime, timedelta, timezone

import pytest

from stringsexport.log import MemoryLog
from stringsexport.models.term import TermRecord


@pytest.fixture
def memory_log():
    return MemoryLog()


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone(timedelta(hours=1)))


def make_term(term, definition=None, context=None, term_plural=None, comment=None):
    """Build a TermRecord the way the API payload would describe it."""
    return TermRecord.from_dict({
        "term": term,
        "definition": definition,
        "context": context,
        "term_plural": term_plural,
        "comment": comment,
    })


@pytest.fixture
def term_factory():
    return make_term
