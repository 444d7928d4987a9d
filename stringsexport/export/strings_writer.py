"""Writer for Apple's Localizable.strings format."""

from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..formatting.filters import has_strings_value, is_android_term
from ..formatting.sections import fold_sections
from ..formatting.text_transform import COMMENT_RULES, OutputFormat, apply_rules, transform_text
from ..models.export_stats import ExportStats
from ..models.term import TermRecord
from .base import EXPORT_SOURCE, EXPORT_URL, BaseWriter, format_timestamp


class StringsFileWriter(BaseWriter):
    """Writer for flat `"key" = "value";` files."""

    def write(
        self,
        terms: Iterable[TermRecord],
        output_path: Union[str, Path],
        substitutions: Optional[Dict[str, str]] = None,
        print_date: bool = False,
        now: Optional[datetime] = None,
    ) -> ExportStats:
        """
        Write the Localizable.strings file.

        Args:
            terms: Terms in the order they should appear
            output_path: Path of the file to write
            substitutions: Literal replacements applied to every translation
            print_date: Add the generation date to the header
            now: Timestamp to print instead of the current time

        Returns:
            ExportStats for the run
        """
        content, stats = self.render(terms, substitutions, print_date, now)
        self._write_file(output_path, content)
        self._log_stats(stats)
        return stats

    def render(
        self,
        terms: Iterable[TermRecord],
        substitutions: Optional[Dict[str, str]] = None,
        print_date: bool = False,
        now: Optional[datetime] = None,
    ) -> Tuple[str, ExportStats]:
        """Build the file content without touching the disk."""
        stats = ExportStats()
        entries = []

        for record in terms:
            if not has_strings_value(record):
                stats.empty_terms.append(record.term)
                continue
            if is_android_term(record.term):
                stats.android += 1
                continue
            stats.count += 1
            entries.append(record)

        sections = fold_sections(
            entries,
            key=lambda record: record.term,
            render=lambda record: self._entry_lines(record, substitutions),
        )

        lines = self._header_lines(print_date, now) + sections.lines
        return "\n".join(lines) + "\n", stats

    def _header_lines(self, print_date: bool, now: Optional[datetime]) -> List[str]:
        lines = ["/" + "*" * 79, f" * Exported from {EXPORT_SOURCE} - {EXPORT_URL}"]
        if print_date:
            lines.append(f" * {format_timestamp(now)}")
        lines += [" " + "*" * 79 + "/", ""]
        return lines

    def _entry_lines(
        self,
        record: TermRecord,
        substitutions: Optional[Dict[str, str]],
    ) -> List[str]:
        text = transform_text(record.singular_text(), OutputFormat.STRINGS, substitutions)

        lines = []
        if record.context:
            lines.append(f"// CONTEXT: {apply_rules(record.context, COMMENT_RULES)}")
        lines.append(f'"{record.term}" = "{text}";')
        return lines
