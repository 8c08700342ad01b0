"""Tests for rich rendering of load reports and resolutions."""

from rich.console import Console

from rule_resolver.loader import load_corpus
from rule_resolver.resolution import explain
from rule_resolver.tui import ReportConsoleUI
from rule_resolver.tui.enums import UIStyle
from rule_resolver.tui.sections import ReportSection
from rule_resolver.validation import Issue, IssueKind


def _ui() -> ReportConsoleUI:
    return ReportConsoleUI(Console(record=True, width=140, color_system=None))


def test_render_issues_lists_each_issue() -> None:
    index, issues = load_corpus(
        {
            "ok.md": "---\nglobs: *.py\n---\n",
            "broken.md": "---\nglobs: [unclosed\n",
        }
    )
    ui = _ui()
    ui.render_issues(index, issues)
    output = ui.console.export_text()
    assert "corpus overview" in output
    assert "broken.md" in output
    assert "unterminated_front_matter" in output
    assert "error=1" in output


def test_render_issues_without_issues(scenario_sources) -> None:
    index, issues = load_corpus(scenario_sources)
    ui = _ui()
    ui.render_issues(index, issues)
    output = ui.console.export_text()
    assert "No issues found." in output


def test_render_resolution_table(scenario_sources) -> None:
    index, _ = load_corpus(scenario_sources)
    ui = _ui()
    ui.render_resolution("main.py", explain(index, "main.py"))
    output = ui.console.export_text()
    assert "rules for main.py" in output
    assert "*.py" in output
    assert "match all" in output
    assert output.index("Python rules") < output.index("Everywhere")


def test_render_resolution_without_matches() -> None:
    index, _ = load_corpus({"py.md": "---\nglobs: *.py\n---\n"})
    ui = _ui()
    ui.render_resolution("main.go", explain(index, "main.go"))
    assert "No rules apply." in ui.console.export_text()


def test_issue_sections_take_the_worst_severity_color() -> None:
    warning = Issue("a.md", IssueKind.DUPLICATE_ID, "dup")
    error = Issue("b.md", IssueKind.INVALID_PATTERN, "bad")
    info = Issue("<corpus>", IssueKind.EMPTY_CORPUS, "none")
    assert ReportSection.style_for([]) == UIStyle.BLUE.value
    assert ReportSection.style_for([info]) == UIStyle.DIM.value
    assert ReportSection.style_for([info, warning]) == UIStyle.YELLOW.value
    assert ReportSection.style_for([warning, error, info]) == UIStyle.RED.value

    panel = ReportSection.issues_block("issues", "body", [warning, error])
    assert panel.border_style == UIStyle.RED.value
    assert panel.subtitle == "2 issues"
