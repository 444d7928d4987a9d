"""Configuration management for the export pipeline."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    # Output settings
    output_dir: str = field(
        default_factory=lambda: os.getenv("STRINGS_EXPORT_OUTPUT_DIR", ".")
    )
    print_date: bool = field(
        default_factory=lambda: _env_flag("STRINGS_EXPORT_PRINT_DATE")
    )
    substitutions_path: str = field(
        default_factory=lambda: os.getenv("STRINGS_EXPORT_SUBSTITUTIONS", "")
    )

    # Output file names
    strings_filename: str = "Localizable.strings"
    stringsdict_filename: str = "Localizable.stringsdict"
    context_filename: str = "context.json"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.substitutions_path and not Path(self.substitutions_path).is_file():
            errors.append(f"Substitutions file not found: {self.substitutions_path}")
        if Path(self.output_dir).exists() and not Path(self.output_dir).is_dir():
            errors.append(f"Output path is not a directory: {self.output_dir}")
        return errors


# Global config instance
config = Config()
