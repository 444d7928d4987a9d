"""Escaping rules applied to translations before they are embedded in a file."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class OutputFormat(str, Enum):
    """Destination file formats."""
    STRINGS = "strings"
    STRINGSDICT = "stringsdict"
    CONTEXT = "context"


@dataclass(frozen=True)
class EscapeRule:
    """A single (pattern, replacement) step; literal unless `regex` is set."""

    pattern: str
    replacement: str
    regex: bool = False

    def apply(self, text: str) -> str:
        if self.regex:
            return re.sub(self.pattern, self.replacement, text)
        return text.replace(self.pattern, self.replacement)


# Sometimes inserted by the POEditor exporter
STRIP_LINE_SEPARATOR = EscapeRule("\u2028", "")

# %s / %1$s are C strings, Foundation wants objects (%@ / %1$@)
PLACEHOLDER_REWRITE = EscapeRule(r"%(\d+\$)?s", r"%\1@", regex=True)

STRINGS_RULES: List[EscapeRule] = [
    STRIP_LINE_SEPARATOR,
    EscapeRule("\n", "\\n"),
    EscapeRule('"', '\\"'),
    PLACEHOLDER_REWRITE,
]

STRINGSDICT_RULES: List[EscapeRule] = [
    STRIP_LINE_SEPARATOR,
    EscapeRule("\\n", "\n"),
    PLACEHOLDER_REWRITE,
]

CONTEXT_RULES: List[EscapeRule] = [
    STRIP_LINE_SEPARATOR,
    EscapeRule("\\", "\\\\"),
    EscapeRule('\\\\"', '\\"'),
    PLACEHOLDER_REWRITE,
]

# Keeps a `// CONTEXT:` comment on a single line
COMMENT_RULES: List[EscapeRule] = [
    EscapeRule("\n", "\\n"),
]

RULES: Dict[OutputFormat, List[EscapeRule]] = {
    OutputFormat.STRINGS: STRINGS_RULES,
    OutputFormat.STRINGSDICT: STRINGSDICT_RULES,
    OutputFormat.CONTEXT: CONTEXT_RULES,
}


def apply_rules(text: str, rules: List[EscapeRule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def apply_substitutions(text: str, substitutions: Optional[Dict[str, str]] = None) -> str:
    """Replace every occurrence of each key with its value, in table order."""
    if not substitutions:
        return text
    for original, replacement in substitutions.items():
        text = text.replace(original, replacement)
    return text


def rewrite_placeholders(text: str) -> str:
    """Turn printf string placeholders into object placeholders."""
    return PLACEHOLDER_REWRITE.apply(text)


def transform_text(
    text: str,
    output_format: OutputFormat,
    substitutions: Optional[Dict[str, str]] = None,
) -> str:
    """
    Make a translation safe to embed in the given output format.

    Args:
        text: Raw translation
        output_format: Destination format, selects the escaping rules
        substitutions: Optional literal replacements applied first

    Returns:
        Transformed text
    """
    text = apply_substitutions(text, substitutions)
    return apply_rules(text, RULES[OutputFormat(output_format)])
