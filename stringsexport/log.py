"""Log sinks handed to the writers."""

from typing import List, Optional, Protocol, Tuple

from rich.console import Console


class LogSink(Protocol):
    """Anything the writers can report progress and problems to."""

    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ConsoleLog:
    """Prints to a rich console. Term keys are printed as-is, never as markup."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def error(self, message: str) -> None:
        self.console.print(message, style="red", markup=False, highlight=False)


class MemoryLog:
    """Keeps every message in memory, for tests and dry runs."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    @property
    def infos(self) -> List[str]:
        return [message for level, message in self.records if level == "info"]

    @property
    def errors(self) -> List[str]:
        return [message for level, message in self.records if level == "error"]
