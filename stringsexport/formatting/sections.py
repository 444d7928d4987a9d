"""Group consecutive strings under `// MARK:` sections by key prefix."""

from functools import reduce
from typing import Callable, Iterable, List, NamedTuple, Optional, TypeVar

T = TypeVar("T")

SECTION_RULE = "/" * 80


class SectionState(NamedTuple):
    """Carried through the fold: last prefix seen and lines so far."""
    previous_prefix: str
    lines: List[str]


def term_prefix(term: str) -> Optional[str]:
    """Text before the first underscore, or None when there is no underscore."""
    if "_" not in term:
        return None
    return term.split("_", 1)[0]


def mark_title(prefix: str) -> str:
    """First character upper-cased, the rest lower-cased."""
    return prefix[:1].upper() + prefix[1:].lower()


def section_marker(prefix: str) -> List[str]:
    return ["", SECTION_RULE, f"// MARK: {mark_title(prefix)}"]


def fold_sections(
    items: Iterable[T],
    key: Callable[[T], str],
    render: Callable[[T], List[str]],
) -> SectionState:
    """
    Render items in order, inserting a section marker whenever the key
    prefix differs from the previous one.

    Args:
        items: Already filtered items
        key: Returns the term key of an item
        render: Returns the lines for an item

    Returns:
        Final SectionState
    """
    def step(state: SectionState, item: T) -> SectionState:
        prefix = term_prefix(key(item))
        lines = state.lines
        previous = state.previous_prefix
        if prefix and prefix != previous:
            lines = lines + section_marker(prefix)
            previous = prefix
        return SectionState(previous, lines + render(item))

    return reduce(step, items, SectionState("", []))
