"""Collect per-document problems found during one ingestion pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum


logger = logging.getLogger(__name__)


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(str, Enum):
    UNTERMINATED_FRONT_MATTER = "unterminated_front_matter"
    INVALID_PATTERN = "invalid_pattern"
    INVALID_FIELD = "invalid_field"
    DUPLICATE_ID = "duplicate_id"
    MATCH_ALL_IGNORED = "match_all_ignored"
    EMPTY_CORPUS = "empty_corpus"


ISSUE_SEVERITY: dict[IssueKind, IssueSeverity] = {
    IssueKind.UNTERMINATED_FRONT_MATTER: IssueSeverity.ERROR,
    IssueKind.INVALID_PATTERN: IssueSeverity.ERROR,
    IssueKind.INVALID_FIELD: IssueSeverity.WARNING,
    IssueKind.DUPLICATE_ID: IssueSeverity.WARNING,
    IssueKind.MATCH_ALL_IGNORED: IssueSeverity.WARNING,
    IssueKind.EMPTY_CORPUS: IssueSeverity.INFO,
}

_LOG_LEVELS: dict[IssueSeverity, int] = {
    IssueSeverity.ERROR: logging.ERROR,
    IssueSeverity.WARNING: logging.WARNING,
    IssueSeverity.INFO: logging.INFO,
}


@dataclass(frozen=True)
class Issue:
    subject: str
    kind: IssueKind
    detail: str

    @property
    def severity(self) -> IssueSeverity:
        return ISSUE_SEVERITY[self.kind]

    def __str__(self) -> str:
        return (
            f"[{self.severity.value}] {self.subject}: {self.kind.value} ({self.detail})"
        )


class ValidationReporter:
    """Accumulates issues for a single corpus load.

    Recording an issue never raises; callers inspect :meth:`report` once the
    whole batch has been ingested and decide whether to warn or abort.
    """

    def __init__(self) -> None:
        self._issues: list[Issue] = []

    def add(self, subject: str, kind: IssueKind, detail: str) -> Issue:
        issue = Issue(subject=subject, kind=kind, detail=detail)
        self._issues.append(issue)
        logger.log(
            _LOG_LEVELS[issue.severity],
            "%s: %s (%s)",
            subject,
            kind.value,
            detail,
        )
        return issue

    def report(self) -> list[Issue]:
        return list(self._issues)

    def has_errors(self) -> bool:
        return any(issue.severity == IssueSeverity.ERROR for issue in self._issues)

    def summary(self) -> dict[str, int]:
        counts = {kind.value: 0 for kind in IssueKind}
        for issue in self._issues:
            counts[issue.kind.value] += 1
        counts["issues"] = len(self._issues)
        return counts

    def __len__(self) -> int:
        return len(self._issues)
