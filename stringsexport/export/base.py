"""Behaviour shared by every file writer."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..log import ConsoleLog, LogSink
from ..models.export_stats import ExportStats

EXPORT_SOURCE = "POEditor"
EXPORT_URL = "https://poeditor.com"


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Local time as `YYYY-MM-DD HH:MM:SS +ZZZZ`."""
    stamp = now or datetime.now().astimezone()
    return stamp.strftime("%Y-%m-%d %H:%M:%S %z").rstrip()


class BaseWriter:
    """Renders in memory, then writes the whole file in one call."""

    def __init__(self, log: Optional[LogSink] = None):
        self.log = log or ConsoleLog()

    def _write_file(self, path: Union[str, Path], content: Union[str, bytes]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        self.log.info(f" - Save to file: {path}")
        if isinstance(content, bytes):
            with open(path, "wb") as f:
                f.write(content)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)

    def _log_stats(self, stats: ExportStats) -> None:
        self.log.info(
            f"   [Stats] {stats.count} strings processed "
            f"(Filtered out {stats.android} android strings)"
        )
        if stats.empty_terms:
            self.log.error(
                f"   Found {stats.empty_count} empty value(s) for the following term(s):"
            )
            for term in stats.empty_terms:
                self.log.error(f"    - {term!r}")
