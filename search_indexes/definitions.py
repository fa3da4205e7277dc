"""Load index definitions from config/indexes/*.json."""
import json
import os
from typing import Any, Optional

from config import INDEX_CONFIG_DIR


class IndexDefinitionError(Exception):
    """An index definition file is missing or is not valid JSON."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid index definition {path}: {reason}")
        self.path = path


def definition_path(file_name: str, base_dir: Optional[str] = None) -> str:
    return os.path.join(base_dir or os.getcwd(), INDEX_CONFIG_DIR, file_name)


def load_definition(file_name: str, base_dir: Optional[str] = None) -> dict[str, Any]:
    """
    Read one index definition. The document is opaque here: it is handed to the driver as-is.
    Raises IndexDefinitionError (with the full path) if the file is missing or not JSON.
    """
    path = definition_path(file_name, base_dir)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise IndexDefinitionError(path, "file not found") from e
    except json.JSONDecodeError as e:
        raise IndexDefinitionError(path, str(e)) from e
