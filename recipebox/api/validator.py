import json
import os
from functools import lru_cache
from typing import Any, Dict, Tuple

from jsonschema import ValidationError, validate

# Path: recipebox/api/schemas/
SCHEMA_DIR = os.path.join(
    os.path.dirname(__file__),
    "schemas"
)


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """
    Load a request JSON schema by name (without the .json suffix).
    """
    path = os.path.join(SCHEMA_DIR, f"{name}.json")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_payload(name: str, data: Any) -> Tuple[bool, str]:
    """
    Validate a request body against the named schema.

    Returns:
        (True, "") if valid
        (False, "<error message>") if invalid
    """
    schema = load_schema(name)

    try:
        validate(instance=data, schema=schema)
        return True, ""
    except ValidationError as e:
        return False, e.message
