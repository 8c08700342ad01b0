"""Resolve the ordered list of rules that apply to a file path."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rule_resolver.documents.models import Document
from rule_resolver.globs.matcher import GlobMatcher
from rule_resolver.index import IndexedRule, RuleIndex
from rule_resolver.utils import normalize_path


@dataclass(frozen=True)
class RuleMatch:
    document: Document
    pattern: str | None
    specificity: int | None

    @property
    def is_match_all(self) -> bool:
        return self.pattern is None

    def sort_key(self) -> tuple[int, int, int]:
        # Glob matches first, most specific first, then ingestion order.
        if self.specificity is None:
            return (1, 0, self.document.source_order)
        return (0, -self.specificity, self.document.source_order)


def explain(index: RuleIndex, target_path: str) -> list[RuleMatch]:
    path = normalize_path(target_path)
    matches = [
        match
        for match in (_match_rule(rule, path) for rule in index.rules())
        if match is not None
    ]
    return sorted(matches, key=RuleMatch.sort_key)


def resolve(index: RuleIndex, target_path: str) -> list[Document]:
    return [match.document for match in explain(index, target_path)]


def resolve_many(index: RuleIndex, target_paths: Iterable[str]) -> list[Document]:
    """Union of the rules for several paths, each ranked by its best match."""
    best: dict[str, RuleMatch] = {}
    for target_path in target_paths:
        for match in explain(index, target_path):
            current = best.get(match.document.id)
            if current is None or match.sort_key() < current.sort_key():
                best[match.document.id] = match
    return [match.document for match in sorted(best.values(), key=RuleMatch.sort_key)]


def _match_rule(rule: IndexedRule, path: str) -> RuleMatch | None:
    best: GlobMatcher | None = None
    for matcher in rule.matchers:
        if not matcher.matches(path):
            continue
        if best is None or matcher.specificity() > best.specificity():
            best = matcher

    if best is not None:
        return RuleMatch(
            document=rule.document,
            pattern=best.pattern,
            specificity=best.specificity(),
        )
    if rule.applies_everywhere:
        return RuleMatch(document=rule.document, pattern=None, specificity=None)
    return None
