"""File writers for the Apple resource formats."""

from .strings_writer import StringsFileWriter
from .stringsdict_writer import StringsDictWriter
from .context_writer import ContextJsonWriter

__all__ = ["StringsFileWriter", "StringsDictWriter", "ContextJsonWriter"]
