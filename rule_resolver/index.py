"""Immutable snapshot of a loaded rule corpus."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from rule_resolver.documents.models import Document
from rule_resolver.errors import DocumentNotFoundError, InvalidPatternError
from rule_resolver.globs.matcher import GlobMatcher, compile_glob
from rule_resolver.validation import IssueKind, ValidationReporter


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexedRule:
    document: Document
    matchers: tuple[GlobMatcher, ...]

    @property
    def applies_everywhere(self) -> bool:
        return self.document.match_all and not self.document.has_globs


class RuleIndex:
    """Read-only collection of rule documents keyed by id.

    Built once per corpus load with :meth:`build`; a reload produces a new
    instance instead of changing this one.
    """

    __slots__ = ("_rules", "_by_id", "_fingerprint")

    def __init__(self, rules: Iterable[IndexedRule] = ()) -> None:
        ordered = tuple(rules)
        by_id: dict[str, IndexedRule] = {}
        for rule in ordered:
            if rule.document.id in by_id:
                raise ValueError(f"duplicate rule id: {rule.document.id}")
            by_id[rule.document.id] = rule
        self._rules = ordered
        self._by_id = MappingProxyType(by_id)
        self._fingerprint = _fingerprint(ordered)

    @classmethod
    def build(
        cls,
        documents: Iterable[Document],
        reporter: ValidationReporter | None = None,
    ) -> "RuleIndex":
        reporter = reporter if reporter is not None else ValidationReporter()
        seen: dict[str, Document] = {}
        rules: list[IndexedRule] = []

        for document in documents:
            first = seen.get(document.id)
            if first is not None:
                reporter.add(
                    document.source_id,
                    IssueKind.DUPLICATE_ID,
                    f"id {document.id!r} already defined by {first.source_id}",
                )
                continue
            seen[document.id] = document
            rules.append(
                IndexedRule(
                    document=document, matchers=_compile_globs(document, reporter)
                )
            )

        index = cls(rules)
        logger.debug("built rule index with %d documents", len(index))
        return index

    def all(self) -> list[Document]:
        return [rule.document for rule in self._rules]

    def rules(self) -> tuple[IndexedRule, ...]:
        return self._rules

    def by_id(self, document_id: str) -> Document:
        rule = self._by_id.get(document_id)
        if rule is None:
            raise DocumentNotFoundError(document_id)
        return rule.document

    def get(self, document_id: str) -> Document | None:
        rule = self._by_id.get(document_id)
        return rule.document if rule is not None else None

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.all())

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleIndex(documents={len(self)}, fingerprint={self._fingerprint[:12]})"


def _compile_globs(
    document: Document, reporter: ValidationReporter
) -> tuple[GlobMatcher, ...]:
    matchers: list[GlobMatcher] = []
    for pattern in document.globs:
        try:
            matchers.append(compile_glob(pattern))
        except InvalidPatternError as exc:
            reporter.add(
                document.source_id,
                IssueKind.INVALID_PATTERN,
                f"{pattern!r}: {exc.detail}",
            )

    if document.match_all and document.has_globs:
        reporter.add(
            document.source_id,
            IssueKind.MATCH_ALL_IGNORED,
            "match-all flag has no effect on a document that declares globs",
        )
    return tuple(matchers)


def _fingerprint(rules: tuple[IndexedRule, ...]) -> str:
    digest = hashlib.sha256()
    for rule in rules:
        document = rule.document
        digest.update(document.id.encode("utf-8"))
        digest.update(b"\0")
        digest.update("\n".join(document.globs).encode("utf-8"))
        digest.update(b"\0")
        digest.update(document.body.encode("utf-8"))
        digest.update(b"\0")
    return digest.hexdigest()
