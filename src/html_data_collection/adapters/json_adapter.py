"""JSON_Adapter for reading HTML data files.

This adapter handles JSON file reading for user-supplied HTML data sources.
"""

import json
from pathlib import Path
from typing import Any

from .base_adapter import BaseAdapter


class JSON_Adapter(BaseAdapter):
    """Adapter for JSON HTML data files.

    Args:
        file_path: Path to JSON file
    """

    def __init__(self, file_path: Path | str) -> None:
        """Initialize adapter.

        Args:
            file_path: Path to JSON file

        Raises:
            FileNotFoundError: JSON file does not exist
        """
        self.file_path = Path(file_path)
        if not self.file_path.is_file():
            raise FileNotFoundError(f"JSON file not found: {self.file_path}")
        self.label = str(self.file_path)

    def read(self) -> Any:
        """Read a JSON file.

        Returns:
            Parsed JSON value

        Raises:
            ValueError: Failed to read JSON
        """
        try:
            with open(self.file_path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to read JSON: {self.file_path}") from e

    def repair(self, data: Any) -> Any:
        """Wrap a bare top-level tag list into a version 1 document."""
        if isinstance(data, list):
            return {"version": 1, "tags": data}
        return data
