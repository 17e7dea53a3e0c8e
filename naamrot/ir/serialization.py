"""
IR Serialization — JSON import/export for conversion results.
"""

from pathlib import Path
from typing import Union

from naamrot.ir.schema import ConvertResult


def to_json(result: ConvertResult, indent: int = 2) -> str:
    """Serialize a ConvertResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> ConvertResult:
    """Deserialize a ConvertResult from JSON string."""
    return ConvertResult.model_validate_json(json_str)


def save(result: ConvertResult, path: Union[str, Path]) -> None:
    """Save a ConvertResult to a JSON file."""
    Path(path).write_text(to_json(result))


def load(path: Union[str, Path]) -> ConvertResult:
    """Load a ConvertResult from a JSON file."""
    return from_json(Path(path).read_text())
