"""Tests for the per-format escaping rules."""

from stringsexport.formatting.text_transform import (
    CONTEXT_RULES,
    EscapeRule,
    OutputFormat,
    apply_rules,
    apply_substitutions,
    rewrite_placeholders,
    transform_text,
)


class TestPlaceholderRewrite:
    """%s placeholders become %@."""

    def test_plain_and_positional(self):
        assert rewrite_placeholders("%s and %2$s") == "%@ and %2$@"

    def test_no_placeholders_unchanged(self):
        assert rewrite_placeholders("Hello world") == "Hello world"

    def test_other_specifiers_untouched(self):
        assert rewrite_placeholders("%d items, %1$ld, %@") == "%d items, %1$ld, %@"

    def test_applied_for_every_format(self):
        for output_format in OutputFormat:
            assert transform_text("Hi %s", output_format) == "Hi %@"


class TestSubstitutions:
    """Literal replacements applied before escaping."""

    def test_replaces_all_occurrences(self):
        result = apply_substitutions("AppName loves AppName", {"AppName": "Acme"})
        assert result == "Acme loves Acme"

    def test_none_or_empty_table(self):
        assert apply_substitutions("text", None) == "text"
        assert apply_substitutions("text", {}) == "text"

    def test_substitution_runs_before_escaping(self):
        result = transform_text("Say {q}", OutputFormat.STRINGS, {"{q}": '"hi"'})
        assert result == 'Say \\"hi\\"'


class TestStringsRules:
    """Escaping for Localizable.strings."""

    def test_newline_becomes_escape(self):
        assert transform_text("Line1\nLine2", OutputFormat.STRINGS) == "Line1\\nLine2"

    def test_quotes_escaped(self):
        assert transform_text('a "b" c', OutputFormat.STRINGS) == 'a \\"b\\" c'

    def test_line_separator_stripped(self):
        assert transform_text("a\u2028b", OutputFormat.STRINGS) == "ab"


class TestStringsDictRules:
    """Escaping for the XML plural table."""

    def test_escaped_newline_becomes_real(self):
        assert transform_text("Line1\\nLine2", OutputFormat.STRINGSDICT) == "Line1\nLine2"

    def test_strings_output_round_trips(self):
        on_disk = transform_text("Line1\nLine2", OutputFormat.STRINGS)
        assert on_disk == "Line1\\nLine2"
        assert transform_text(on_disk, OutputFormat.STRINGSDICT) == "Line1\nLine2"

    def test_quotes_left_alone(self):
        assert transform_text('a "b"', OutputFormat.STRINGSDICT) == 'a "b"'


class TestContextRules:
    """Escaping for the context JSON index."""

    def test_backslash_doubled(self):
        assert apply_rules("a\\b", CONTEXT_RULES) == "a\\\\b"

    def test_escaped_quote_not_double_escaped(self):
        assert apply_rules('say \\"hi\\"', CONTEXT_RULES) == 'say \\"hi\\"'

    def test_rules_are_ordered(self):
        assert [type(rule) for rule in CONTEXT_RULES] == [EscapeRule] * len(CONTEXT_RULES)
        assert CONTEXT_RULES[1].pattern == "\\"
        assert CONTEXT_RULES[2].pattern == '\\\\"'


class TestEscapeRule:
    """Single rules are usable on their own."""

    def test_literal_rule(self):
        assert EscapeRule(".", "!").apply("a.b.c") == "a!b!c"

    def test_regex_rule(self):
        assert EscapeRule(r"\d+", "#", regex=True).apply("a1b22") == "a#b#"
