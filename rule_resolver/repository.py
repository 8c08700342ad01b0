"""Read rule documents from a directory on disk."""

from __future__ import annotations

from pathlib import Path

from rule_resolver.constants import RULE_FILE_SUFFIXES, RULES_DIRNAME
from rule_resolver.errors import RuleSourceFileError
from rule_resolver.index import RuleIndex
from rule_resolver.loader import load_corpus
from rule_resolver.validation import Issue


class RulesRepository:
    def __init__(self, root: Path) -> None:
        self._rules_dir = Path(root) / RULES_DIRNAME

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def list_paths(self) -> list[Path]:
        if not self._rules_dir.is_dir():
            return []
        paths: list[Path] = []
        for child in sorted(self._rules_dir.rglob("*")):
            relative = child.relative_to(self._rules_dir)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if child.is_file() and child.suffix in RULE_FILE_SUFFIXES:
                paths.append(child)
        return paths

    def load_sources(self) -> dict[str, str]:
        """Return ``{source_id: text}`` with source ids relative to the rules dir."""
        sources: dict[str, str] = {}
        for path in self.list_paths():
            source_id = path.relative_to(self._rules_dir).as_posix()
            try:
                sources[source_id] = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise RuleSourceFileError(
                    path, f"Rule file is not UTF-8 ({exc.reason})"
                ) from exc
            except OSError as exc:
                raise RuleSourceFileError(
                    path, f"Unreadable rule file ({exc.strerror})"
                ) from exc
        return sources

    def load(self) -> tuple[RuleIndex, list[Issue]]:
        return load_corpus(self.load_sources())
