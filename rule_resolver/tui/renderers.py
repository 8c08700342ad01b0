from rich.console import Console
from rich.markup import escape

from rule_resolver.index import RuleIndex
from rule_resolver.resolution import RuleMatch
from rule_resolver.tui.enums import UIStyle
from rule_resolver.tui.sections import ReportSection
from rule_resolver.tui.tables import IssueTable, ResolutionTable
from rule_resolver.utils import normalize_path
from rule_resolver.validation import Issue


class ReportConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_issues(self, index: RuleIndex, issues: list[Issue]) -> None:
        self.console.print(
            ReportSection.issues_block(
                "corpus overview", IssueTable.summary_block(index, issues), issues
            )
        )
        if not issues:
            self.console.print(
                ReportSection.block(
                    "issues", "No issues found.", style=UIStyle.DIM.value
                )
            )
            return
        self.console.print(
            ReportSection.issues_block(
                "issues", IssueTable.issues_table(issues), issues
            )
        )

    def render_resolution(self, target_path: str, matches: list[RuleMatch]) -> None:
        title = f"rules for {escape(normalize_path(target_path))}"
        if not matches:
            self.console.print(
                ReportSection.block(title, "No rules apply.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            ReportSection.block(
                title,
                ResolutionTable.matches_table(matches),
                style=UIStyle.CYAN.value,
                subtitle=f"{len(matches)} rules",
            )
        )
