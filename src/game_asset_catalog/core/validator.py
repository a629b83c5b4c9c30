"""Schema checks for ``assets.json`` documents.

The indexer validates every document before it is written, so a bug in
count aggregation or pack tagging surfaces as a readable error instead of a
malformed file on disk.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator, ValidationError

from .types import IndexDocument

# Bundled alongside this module as package data
SCHEMA_PATH = Path(__file__).parent / "schemas" / "asset_index.schema.json"


def load_schema() -> dict[str, Any]:
    """Read the bundled asset index schema.

    Raises:
        FileNotFoundError: If the schema file is missing from the install
        json.JSONDecodeError: If the schema file is corrupt
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def _index_errors(document: IndexDocument) -> list[ValidationError]:
    validator = Draft7Validator(load_schema())
    return sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])


def validate_index(document: IndexDocument) -> None:
    """Check an index document against the asset index schema.

    Raises:
        ValidationError: The first problem found, ordered by document path
        FileNotFoundError: If the schema file is missing
        json.JSONDecodeError: If the schema file is corrupt
    """
    errors = _index_errors(document)
    if errors:
        raise errors[0]


def describe_error(document: IndexDocument, error: ValidationError) -> str:
    """Render one schema violation, naming the asset entry it belongs to."""
    location = " -> ".join(str(p) for p in error.path) if error.path else "root"
    line = f"{location}: {error.message}"

    path = list(error.path)
    if len(path) >= 2 and path[0] == "assets" and isinstance(path[1], int):
        assets = document.get("assets", [])
        if path[1] < len(assets) and isinstance(assets[path[1]], dict):
            name = assets[path[1]].get("name")
            if name:
                line += f" (asset {name!r})"
    return line


def validate_index_with_error_details(document: IndexDocument) -> tuple[bool, str | None]:
    """Validate an index document and describe every violation.

    Returns:
        ``(True, None)`` for a valid document, otherwise ``(False, message)``
        where the message lists one violation per line.
    """
    try:
        errors = _index_errors(document)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"

    if not errors:
        return True, None

    noun = "problem" if len(errors) == 1 else "problems"
    lines = [f"{len(errors)} {noun} in index document:"]
    lines.extend(f"  {describe_error(document, error)}" for error in errors)
    return False, "\n".join(lines)
