"""JSON file operations utilities."""

import json
from typing import Any, Dict


def read_json_file(file_path: str, encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Read a JSON file and return parsed data.

    Args:
        file_path: Path to JSON file
        encoding: File encoding (default: utf-8)

    Returns:
        Parsed JSON data as dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON parsing fails
        ValueError: If the document is not a JSON object
    """
    with open(file_path, "r", encoding=encoding) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}, got {type(data).__name__}")
    return data


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Parse a JSON document that must be an object.

    Raises:
        json.JSONDecodeError: If JSON parsing fails
        ValueError: If the document is not a JSON object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
