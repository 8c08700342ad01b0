"""Rule document data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Document:
    id: str
    source_id: str
    description: str = ""
    globs: tuple[str, ...] = ()
    body: str = ""
    source_order: int = 0
    match_all: bool = False
    front_matter: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    @property
    def has_globs(self) -> bool:
        return bool(self.globs)
