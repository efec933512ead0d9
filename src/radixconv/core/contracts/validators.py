"""
Alphabet Descriptor Contract

Tagged descriptor {"bijective": bool, "symbols": [...]} проверяется по
JSON Schema (schema/alphabet_descriptor.json, package data) до построения
Pydantic модели алфавита.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


ALPHABET_DESCRIPTOR_VALIDATOR: Final = Draft202012Validator(load_schema("alphabet_descriptor"))


def descriptor_error(descriptor: Mapping[str, Any]) -> Optional[ValidationError]:
    """
    Наиболее релевантное нарушение контракта, либо None для валидного descriptor'а.

    Examples:
        >>> descriptor_error({"bijective": True, "symbols": ["_", "a"]}) is None
        True
        >>> descriptor_error({"symbols": ["0"]}).validator
        'minItems'
    """
    return best_match(ALPHABET_DESCRIPTOR_VALIDATOR.iter_errors(descriptor))


def describe_error(error: ValidationError) -> str:
    """Короткая причина: путь к полю и сообщение jsonschema."""
    location = ".".join(str(part) for part in error.absolute_path)
    return f"{location}: {error.message}" if location else error.message
