"""Writer for Apple's Localizable.stringsdict plural rules (XML property list)."""

import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from lxml import etree

from ..formatting.filters import has_plural_value, is_android_term
from ..formatting.text_transform import OutputFormat, transform_text
from ..models.export_stats import ExportStats
from ..models.term import TermRecord
from .base import EXPORT_SOURCE, EXPORT_URL, BaseWriter, format_timestamp

FORMAT_VARIABLE = "format"
INDENT = "    "

# Characters XML 1.0 cannot carry, escaped or not
XML_INVALID_CHARS = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class StringsDictWriter(BaseWriter):
    """Writer for .stringsdict files."""

    def write(
        self,
        terms: Iterable[TermRecord],
        output_path: Union[str, Path],
        substitutions: Optional[Dict[str, str]] = None,
        print_date: bool = False,
        now: Optional[datetime] = None,
    ) -> ExportStats:
        """
        Write the Localizable.stringsdict file.

        Only terms whose definition is a plural mapping are written.

        Args:
            terms: Terms in the order they should appear
            output_path: Path of the file to write
            substitutions: Literal replacements applied to every translation
            print_date: Add the generation date as an XML comment
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
    ) -> Tuple[bytes, ExportStats]:
        """Build the XML document without touching the disk."""
        stats = ExportStats()

        plist = etree.Element("plist", version="1.0")
        root_dict = etree.SubElement(plist, "dict")

        for record in terms:
            if not has_plural_value(record):
                stats.empty_terms.append(record.term)
                continue
            if is_android_term(record.term):
                stats.android += 1
                continue
            forms = record.plural_forms()
            if forms is None:
                continue
            stats.count += 1
            self._append_entry(root_dict, record.plural_key, forms, substitutions)

        tree = etree.ElementTree(plist)
        comments = [f" Exported from {EXPORT_SOURCE} "]
        if print_date:
            comments.append(f" {format_timestamp(now)} ")
        comments.append(f" see {EXPORT_URL} ")
        for text in comments:
            plist.addprevious(etree.Comment(text))

        etree.indent(tree, space=INDENT)
        content = etree.tostring(
            tree, encoding="UTF-8", xml_declaration=True, pretty_print=True
        )
        return content, stats

    def _append_entry(
        self,
        parent: etree._Element,
        key: str,
        forms: Dict[str, str],
        substitutions: Optional[Dict[str, str]],
    ) -> None:
        _key(parent, key)
        entry = etree.SubElement(parent, "dict")
        _key(entry, "NSStringLocalizedFormatKey")
        _string(entry, f"%#@{FORMAT_VARIABLE}@")
        _key(entry, FORMAT_VARIABLE)

        format_dict = etree.SubElement(entry, "dict")
        _key(format_dict, "NSStringFormatSpecTypeKey")
        _string(format_dict, "NSStringPluralRuleType")
        _key(format_dict, "NSStringFormatValueTypeKey")
        _string(format_dict, "d")

        for quantity, text in forms.items():
            text = transform_text(text, OutputFormat.STRINGSDICT, substitutions)
            if XML_INVALID_CHARS.search(text):
                raise ValueError(
                    f"Plural text for {key!r} ({quantity}) contains characters not allowed in XML"
                )
            _key(format_dict, quantity)
            _string(format_dict, text)


def _key(parent: etree._Element, text: str) -> None:
    etree.SubElement(parent, "key").text = text


def _string(parent: etree._Element, text: str) -> None:
    etree.SubElement(parent, "string").text = text
