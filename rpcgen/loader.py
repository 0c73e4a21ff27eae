"""Locate and read service definition documents.

Reads every file in a definitions directory as one JSON document.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import SchemaError

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path("service_definitions")


def list_definition_files(directory: Path | None = None) -> list[Path]:
    """List the definition files in a directory, sorted by file name."""
    definitions = Path(directory or DEFINITIONS_DIR)
    return sorted(
        (p for p in definitions.iterdir() if p.is_file()),
        key=lambda p: p.name,
    )


def load_definition(path: Path) -> dict[str, Any]:
    """Load one definition document from disk."""
    logger.debug("Loading %s", path)
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except ValueError as e:
            raise SchemaError(f"invalid JSON: {e}", schema_path=str(path)) from e
