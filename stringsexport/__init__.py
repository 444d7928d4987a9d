"""Export localization terms to Apple resource files."""

__version__ = "0.1.0"
