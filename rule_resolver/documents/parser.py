"""Parse rule documents: a ``---`` front-matter block followed by a markdown body."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any

import yaml

from rule_resolver.constants import (
    DESCRIPTION_KEY,
    FRONT_MATTER_DELIMITER,
    GLOBS_KEY,
    ID_KEY,
    MATCH_ALL_KEYS,
    TRUE_VALUES,
)
from rule_resolver.documents.models import Document
from rule_resolver.documents.schema import front_matter_errors
from rule_resolver.errors import UnterminatedFrontMatterError
from rule_resolver.utils import normalize_path
from rule_resolver.validation import IssueKind, ValidationReporter


logger = logging.getLogger(__name__)

_BOM = "\ufeff"
_QUOTES = ("'", '"')


def split_front_matter(text: str, source_id: str) -> tuple[str | None, str]:
    """Return ``(front_matter_block, body)``.

    The block is ``None`` when the text does not open with a delimiter line.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONT_MATTER_DELIMITER:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return block, body

    raise UnterminatedFrontMatterError(source_id)


def parse_document(
    raw_text: str,
    source_id: str,
    source_order: int = 0,
    reporter: ValidationReporter | None = None,
) -> Document:
    block, body = split_front_matter(raw_text, source_id)
    raw = _load_block(block) if block is not None else {}

    rejected = front_matter_errors(raw)
    for key, message in rejected.items():
        if reporter is not None:
            reporter.add(source_id, IssueKind.INVALID_FIELD, f"{key}: {message}")
        else:
            logger.warning(
                "%s: ignoring front-matter key %r (%s)", source_id, key, message
            )

    front_matter = MappingProxyType(
        {str(key): _flatten(value) for key, value in raw.items()}
    )
    usable = {key: value for key, value in raw.items() if key not in rejected}

    document_id = _flatten(usable.get(ID_KEY)).strip() or derive_document_id(source_id)
    description = _flatten(usable.get(DESCRIPTION_KEY))
    globs = split_globs(usable.get(GLOBS_KEY))
    match_all = any(_is_true(usable.get(key)) for key in MATCH_ALL_KEYS)

    return Document(
        id=document_id,
        source_id=source_id,
        description=description,
        globs=globs,
        body=body,
        source_order=source_order,
        match_all=match_all,
        front_matter=front_matter,
    )


def derive_document_id(source_id: str) -> str:
    normalized = normalize_path(source_id)
    path = PurePosixPath(normalized)
    if path.suffix:
        return str(path.with_suffix(""))
    return normalized


def split_globs(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    items = value if isinstance(value, list) else [value]

    globs: list[str] = []
    for item in items:
        for entry in _flatten(item).split(","):
            entry = _unquote(entry.strip())
            if entry:
                globs.append(entry)
    return tuple(globs)


def _load_block(block: str) -> dict[str, Any]:
    try:
        # BaseLoader keeps every scalar as the string written in the file.
        loaded = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError:
        loaded = None
    else:
        if loaded is None:
            return {}
    if isinstance(loaded, dict):
        return {str(key): value for key, value in loaded.items()}
    # Cursor-style headers such as ``globs: *.py`` are not valid YAML.
    return _load_flat_block(block)


def _load_flat_block(block: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    last_key: str | None = None
    for line in block.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("- ") and last_key is not None:
            current = fields.get(last_key)
            if not isinstance(current, list):
                current = [] if current in (None, "") else [current]
            current.append(_unquote(stripped[2:].strip()))
            fields[last_key] = current
            continue
        key, separator, value = stripped.partition(":")
        if not separator or not key.strip():
            logger.debug("skipping front-matter line without a key: %r", line)
            continue
        last_key = key.strip()
        fields[last_key] = _unquote(value.strip())
    return fields


def _flatten(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(_flatten(item) for item in value)
    return str(value)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _is_true(value: Any) -> bool:
    return _flatten(value).strip().lower() in TRUE_VALUES
