"""Tests for ValidationReporter."""

import logging

from rule_resolver.validation import (
    Issue,
    IssueKind,
    IssueSeverity,
    ValidationReporter,
)


def test_report_preserves_order() -> None:
    reporter = ValidationReporter()
    reporter.add("a.md", IssueKind.INVALID_PATTERN, "bad")
    reporter.add("b.md", IssueKind.DUPLICATE_ID, "dup")
    assert [issue.subject for issue in reporter.report()] == ["a.md", "b.md"]
    assert len(reporter) == 2


def test_report_is_a_snapshot() -> None:
    reporter = ValidationReporter()
    reporter.add("a.md", IssueKind.DUPLICATE_ID, "dup")
    reporter.report().clear()
    assert len(reporter.report()) == 1


def test_severity_per_kind() -> None:
    unterminated = Issue("x", IssueKind.UNTERMINATED_FRONT_MATTER, "")
    assert unterminated.severity == IssueSeverity.ERROR
    assert Issue("x", IssueKind.INVALID_PATTERN, "").severity == IssueSeverity.ERROR
    assert Issue("x", IssueKind.DUPLICATE_ID, "").severity == IssueSeverity.WARNING
    assert Issue("x", IssueKind.EMPTY_CORPUS, "").severity == IssueSeverity.INFO


def test_has_errors_ignores_warnings() -> None:
    reporter = ValidationReporter()
    reporter.add("a.md", IssueKind.DUPLICATE_ID, "dup")
    assert not reporter.has_errors()
    reporter.add("b.md", IssueKind.UNTERMINATED_FRONT_MATTER, "open")
    assert reporter.has_errors()


def test_summary_counts() -> None:
    reporter = ValidationReporter()
    reporter.add("a.md", IssueKind.INVALID_PATTERN, "one")
    reporter.add("a.md", IssueKind.INVALID_PATTERN, "two")
    summary = reporter.summary()
    assert summary["invalid_pattern"] == 2
    assert summary["duplicate_id"] == 0
    assert summary["issues"] == 2


def test_issues_are_logged_at_their_severity(caplog) -> None:
    reporter = ValidationReporter()
    with caplog.at_level(logging.INFO, logger="rule_resolver.validation"):
        reporter.add("a.md", IssueKind.UNTERMINATED_FRONT_MATTER, "open")
        reporter.add("<corpus>", IssueKind.EMPTY_CORPUS, "nothing")
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.ERROR, logging.INFO]
    assert "a.md" in caplog.records[0].getMessage()


def test_issue_str() -> None:
    issue = Issue("a.md", IssueKind.DUPLICATE_ID, "id 'a' already defined")
    assert str(issue) == "[warning] a.md: duplicate_id (id 'a' already defined)"
