"""Data models for terms exported from the translation platform."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Union


@dataclass(frozen=True)
class SingleText:
    """A definition holding one literal translation."""

    text: str

    def singular(self) -> Optional[str]:
        return self.text

    def plural_forms(self) -> Optional[Dict[str, str]]:
        return None

    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class PluralText:
    """A definition keyed by plural category ("one", "few", "other"...)."""

    forms: Dict[str, str] = field(default_factory=dict)

    def singular(self) -> Optional[str]:
        """The "one" category is what a flat strings table gets."""
        return self.forms.get("one")

    def plural_forms(self) -> Optional[Dict[str, str]]:
        return self.forms

    def is_empty(self) -> bool:
        return not self.forms


Definition = Union[SingleText, PluralText]


@dataclass(frozen=True)
class TermRecord:
    """Represents a single term as returned by the translation platform."""

    term: Optional[str]
    definition: Optional[Definition] = None
    term_plural: Optional[str] = None
    comment: Optional[str] = None
    context: Optional[str] = None

    @property
    def plural_key(self) -> Optional[str]:
        """Key used in the plural table."""
        return self.term_plural or self.term

    def singular_text(self) -> Optional[str]:
        if self.definition is None:
            return None
        return self.definition.singular()

    def plural_forms(self) -> Optional[Dict[str, str]]:
        if self.definition is None:
            return None
        return self.definition.plural_forms()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TermRecord":
        """
        Build a record from one term object of the API payload.

        Args:
            data: Mapping with "term", "definition" and optional
                "term_plural", "comment", "context" keys

        Returns:
            TermRecord

        Raises:
            TypeError: If "definition" is neither a string, a mapping nor null
        """
        return cls(
            term=data.get("term"),
            definition=parse_definition(data.get("definition")),
            term_plural=data.get("term_plural") or None,
            comment=data.get("comment"),
            context=data.get("context"),
        )


def parse_definition(raw: Any) -> Optional[Definition]:
    """Wrap a raw definition value in its variant."""
    if raw is None:
        return None
    if isinstance(raw, str):
        return SingleText(raw)
    if isinstance(raw, dict):
        return PluralText(dict(raw))
    raise TypeError(f"Unsupported definition type: {type(raw).__name__}")
