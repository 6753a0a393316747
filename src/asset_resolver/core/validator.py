"""JSON Schema validation for resolver options and asset metadata.

This module loads the formal JSON Schemas shipped with the package and
validates raw option dictionaries and metadata descriptors against them.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .errors import InvalidOptionsError
from .types import AssetMetadata

# asset_resolver/core/validator.py -> asset_resolver/schemas/
SCHEMA_DIR = Path(__file__).parent.parent / "schemas"
OPTIONS_SCHEMA = "options.schema.json"
METADATA_SCHEMA = "asset_metadata.schema.json"


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the package's schema directory.

    Args:
        name: Schema filename (e.g. 'options.schema.json')

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    schema_path = SCHEMA_DIR / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def format_validation_error(error: ValidationError) -> str:
    """Build a readable message from a jsonschema error."""
    error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
    return f"Validation error at {error_path}: {error.message}"


def validate_options(options: dict[str, Any]) -> None:
    """Validate raw resolver options against the options schema.

    Args:
        options: Options dictionary (project_roots, asset_exts)

    Raises:
        InvalidOptionsError: If the options don't conform to the schema
    """
    try:
        jsonschema.validate(instance=options, schema=load_schema(OPTIONS_SCHEMA))
    except ValidationError as e:
        raise InvalidOptionsError(format_validation_error(e)) from e


def validate_metadata(metadata: AssetMetadata) -> None:
    """Validate an asset metadata descriptor against the metadata schema.

    Args:
        metadata: The descriptor returned by AssetResolver.resolve_metadata

    Raises:
        ValidationError: If the descriptor doesn't conform to the schema
        FileNotFoundError: If schema file is missing
    """
    jsonschema.validate(instance=metadata, schema=load_schema(METADATA_SCHEMA))


def validate_metadata_with_error_details(metadata: AssetMetadata) -> tuple[bool, str | None]:
    """Validate a metadata descriptor and return detailed error information.

    Args:
        metadata: The descriptor to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_metadata(metadata)
        return True, None
    except ValidationError as e:
        error_msg = format_validation_error(e)
        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"
        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
