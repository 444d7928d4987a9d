"""Parser for term lists exported from the POEditor API (JSON)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from ..models.term import TermRecord


class TermPayload(BaseModel):
    """One term object as sent by the API."""
    term: Optional[str] = None
    term_plural: Optional[str] = None
    definition: Union[str, Dict[str, str], None] = None
    comment: Optional[str] = None
    context: Optional[str] = None


class TermsParser:
    """Parser for downloaded term lists."""

    def parse(self, file_path: str) -> List[TermRecord]:
        """
        Parse a terms file and return the records in file order.

        Args:
            file_path: Path to the JSON file

        Returns:
            List of TermRecord
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return self._parse_data(data)

    def parse_string(self, content: str) -> List[TermRecord]:
        """Parse terms from a JSON string."""
        return self._parse_data(json.loads(content))

    def _parse_data(self, data: Any) -> List[TermRecord]:
        # Either a bare list or the API envelope {"result": {"terms": [...]}}
        if isinstance(data, dict):
            result = data.get("result")
            data = result.get("terms") if isinstance(result, dict) else None
        if not isinstance(data, list):
            raise ValueError("Expected a list of terms or an API response with result.terms")

        return [self._parse_term(item) for item in data]

    def _parse_term(self, item: Dict[str, Any]) -> TermRecord:
        payload = TermPayload.model_validate(item)
        return TermRecord.from_dict(payload.model_dump())


def load_substitutions(file_path: Optional[str]) -> Dict[str, str]:
    """
    Load a substitution table from a JSON object file.

    Args:
        file_path: Path to the file, or None for no substitutions

    Returns:
        Mapping of literal text to its replacement, in file order
    """
    if not file_path:
        return {}

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}")
    return {str(key): str(value) for key, value in data.items()}
