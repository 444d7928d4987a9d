"""Tests for the Localizable.strings writer."""

import pytest

from stringsexport.export.strings_writer import StringsFileWriter

HEADER = [
    "/" + "*" * 79,
    " * Exported from POEditor - https://poeditor.com",
    " " + "*" * 79 + "/",
    "",
]


def entry_lines(content):
    return [line for line in content.splitlines() if line.startswith('"')]


class TestStringsFileWriter:
    """Rendering and writing flat strings tables."""

    def test_full_render(self, term_factory, memory_log):
        terms = [
            term_factory("home_title", "Home", context="Main\nscreen"),
            term_factory("home_subtitle", 'Say "hi"'),
            term_factory("settings_title", "Settings %s"),
        ]
        content, stats = StringsFileWriter(memory_log).render(terms)

        expected = HEADER + [
            "",
            "/" * 80,
            "// MARK: Home",
            "// CONTEXT: Main\\nscreen",
            '"home_title" = "Home";',
            '"home_subtitle" = "Say \\"hi\\"";',
            "",
            "/" * 80,
            "// MARK: Settings",
            '"settings_title" = "Settings %@";',
        ]
        assert content == "\n".join(expected) + "\n"
        assert stats.count == 3

    def test_header_with_date(self, fixed_now, memory_log):
        content, _ = StringsFileWriter(memory_log).render([], print_date=True, now=fixed_now)
        assert content.splitlines()[2] == " * 2024-03-05 14:07:09 +0100"

    def test_counts(self, term_factory, memory_log):
        terms = [
            term_factory("a_one", "1"),
            term_factory("a_two_android", "2"),
            term_factory("", "3"),
            term_factory("a_empty", ""),
            term_factory("b_empty_android", ""),
            term_factory("a_plural", {"one": "1 item", "other": "%d items"}),
            term_factory("a_no_one", {"other": "%d items"}),
        ]
        content, stats = StringsFileWriter(memory_log).render(terms)

        assert stats.count == 2
        assert stats.android == 1
        assert stats.empty_terms == ["", "a_empty", "b_empty_android", "a_no_one"]
        assert len(entry_lines(content)) == len(terms) - stats.android - stats.empty_count
        assert '"a_plural" = "1 item";' in content

    def test_android_terms_never_written(self, term_factory, memory_log):
        terms = [term_factory("x_android", "Nope", context="ctx")]
        content, _ = StringsFileWriter(memory_log).render(terms)
        assert "x_android" not in content
        assert "MARK" not in content

    def test_order_preserved(self, term_factory, memory_log):
        keys = ["zeta", "alpha", "mid", "alpha"]
        terms = [term_factory(key, key.upper()) for key in keys]
        content, _ = StringsFileWriter(memory_log).render(terms)
        assert [line.split('"')[1] for line in entry_lines(content)] == keys

    def test_substitutions(self, term_factory, memory_log):
        terms = [term_factory("welcome", "Welcome to {app}")]
        content, _ = StringsFileWriter(memory_log).render(terms, substitutions={"{app}": "Acme"})
        assert '"welcome" = "Welcome to Acme";' in content

    def test_empty_context_has_no_comment(self, term_factory, memory_log):
        content, _ = StringsFileWriter(memory_log).render([term_factory("a", "b", context="")])
        assert "CONTEXT" not in content

    def test_write_logs_summary(self, tmp_path, term_factory, memory_log):
        path = tmp_path / "en.lproj" / "Localizable.strings"
        terms = [
            term_factory("a", "A"),
            term_factory("b_android", "B"),
            term_factory("c", ""),
        ]
        stats = StringsFileWriter(memory_log).write(terms, path)

        assert path.read_text(encoding="utf-8").endswith('"a" = "A";\n')
        assert stats.count == 1
        assert memory_log.infos == [
            f" - Save to file: {path}",
            "   [Stats] 1 strings processed (Filtered out 1 android strings)",
        ]
        assert memory_log.errors == [
            "   Found 1 empty value(s) for the following term(s):",
            "    - 'c'",
        ]

    def test_render_failure_writes_nothing(self, tmp_path, memory_log):
        from stringsexport.models.term import PluralText, TermRecord

        path = tmp_path / "Localizable.strings"
        bad = TermRecord(term="a", definition=PluralText({"one": 1}))
        with pytest.raises(AttributeError):
            StringsFileWriter(memory_log).write([bad], path)
        assert not path.exists()
        assert memory_log.records == []

    def test_io_failure_propagates(self, tmp_path, term_factory, memory_log):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")
        with pytest.raises(OSError):
            StringsFileWriter(memory_log).write([term_factory("a", "A")], blocker / "out.strings")
