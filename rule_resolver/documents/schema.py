"""JSON schema for the recognized front-matter keys."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator

from rule_resolver.constants import (
    DESCRIPTION_KEY,
    FALSE_VALUES,
    GLOBS_KEY,
    ID_KEY,
    MATCH_ALL_KEYS,
    TRUE_VALUES,
)

_FLAG_WORDS = (TRUE_VALUES | FALSE_VALUES) - {""}

_STRING = {"type": "string"}

_FLAG = {
    "type": "string",
    "pattern": "^(?i:" + "|".join(sorted(_FLAG_WORDS)) + ")?$",
}

FRONT_MATTER_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        ID_KEY: {"type": "string", "minLength": 1, "pattern": r"\S"},
        DESCRIPTION_KEY: _STRING,
        GLOBS_KEY: {
            "anyOf": [
                _STRING,
                {"type": "array", "items": _STRING},
            ]
        },
        **{key: _FLAG for key in MATCH_ALL_KEYS},
    },
    "additionalProperties": True,
}

_VALIDATOR = Draft202012Validator(FRONT_MATTER_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def front_matter_errors(payload: dict[str, Any]) -> dict[str, str]:
    """Return ``{key: message}`` for every recognized key that fails the schema."""
    errors: dict[str, str] = {}
    for error in _VALIDATOR.iter_errors(payload):
        if not error.path:
            continue
        key = str(error.path[0])
        errors.setdefault(key, format_schema_error(error))
    return errors
