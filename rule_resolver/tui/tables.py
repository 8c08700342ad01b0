from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from rule_resolver.index import RuleIndex
from rule_resolver.resolution import RuleMatch
from rule_resolver.tui.enums import SEVERITY_STYLE, UIStyle
from rule_resolver.validation import Issue


class IssueTable:
    @staticmethod
    def summary_block(index: RuleIndex, issues: list[Issue]):
        counts = Counter(issue.severity.value for issue in issues)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Documents", str(len(index)))
        table.add_row("Issues", str(len(issues)))
        table.add_row("Severities", "  ".join(chips))
        table.add_row("Fingerprint", index.fingerprint[:12])
        return table

    @staticmethod
    def issues_table(issues: list[Issue]) -> Table:
        table = Table(
            Column(header="Severity", width=9),
            Column(header="Kind", width=26),
            Column(header="Source", overflow="ellipsis", max_width=42),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for issue in issues:
            style = SEVERITY_STYLE.get(issue.severity, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.kind.value,
                escape(issue.subject),
                escape(issue.detail),
            )
        return table


class ResolutionTable:
    @staticmethod
    def matches_table(matches: list[RuleMatch]) -> Table:
        table = Table(
            Column(header="#", width=3, justify="right"),
            Column(header="Rule", overflow="ellipsis", max_width=36),
            Column(header="Matched by", overflow="ellipsis", max_width=30),
            Column(header="Score", width=6, justify="right"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for position, match in enumerate(matches, start=1):
            if match.is_match_all:
                style = UIStyle.MAGENTA.value
                pattern = f"[{style}]match all[/{style}]"
                score = "-"
            else:
                pattern = match.pattern or ""
                score = str(match.specificity)
            table.add_row(
                str(position),
                escape(match.document.id),
                pattern,
                score,
                escape(match.document.description),
            )
        return table
