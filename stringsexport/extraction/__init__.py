"""Reading term lists and substitution tables."""

from .terms_parser import TermsParser, TermPayload, load_substitutions

__all__ = ["TermsParser", "TermPayload", "load_substitutions"]
