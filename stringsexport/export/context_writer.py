"""Writer for the JSON index of translator contexts."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..formatting.filters import has_context, is_android_term
from ..formatting.text_transform import CONTEXT_RULES, apply_rules
from ..models.export_stats import ExportStats
from ..models.term import TermRecord
from .base import BaseWriter, format_timestamp


class ContextJsonWriter(BaseWriter):
    """Writer for the `{date, contexts}` JSON document.

    `substitutions` and `print_date` are accepted so all writers can be
    driven the same way; contexts are never substituted and the date is
    always embedded.
    """

    def write(
        self,
        terms: Iterable[TermRecord],
        output_path: Union[str, Path],
        substitutions: Optional[Dict[str, str]] = None,
        print_date: bool = True,
        now: Optional[datetime] = None,
    ) -> ExportStats:
        content, stats = self.render(terms, substitutions, print_date, now)
        self._write_file(output_path, content)
        self._log_stats(stats)
        return stats

    def render(
        self,
        terms: Iterable[TermRecord],
        substitutions: Optional[Dict[str, str]] = None,
        print_date: bool = True,
        now: Optional[datetime] = None,
    ) -> Tuple[str, ExportStats]:
        stats = ExportStats()
        contexts = []

        for record in terms:
            if not has_context(record):
                stats.empty_terms.append(record.term)
                continue
            if is_android_term(record.term):
                stats.android += 1
                continue
            stats.count += 1
            contexts.append({
                "term": record.term,
                "context": apply_rules(record.context, CONTEXT_RULES),
            })

        data: Dict[str, Any] = {
            "date": format_timestamp(now),
            "contexts": contexts,
        }
        return json.dumps(data, indent=2, ensure_ascii=False), stats

    def _log_stats(self, stats: ExportStats) -> None:
        self.log.info(
            f"   [Stats] {stats.count} contexts processed "
            f"(Filtered out {stats.android} android entries, {stats.empty_count} nil contexts)"
        )
