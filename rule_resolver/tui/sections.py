from collections.abc import Iterable

from rich.console import RenderableType
from rich.panel import Panel

from rule_resolver.tui.enums import SEVERITY_STYLE, UIStyle
from rule_resolver.validation import Issue, IssueSeverity

_SEVERITY_RANK = (IssueSeverity.ERROR, IssueSeverity.WARNING, IssueSeverity.INFO)


class ReportSection:
    """Bordered report blocks; issue blocks take the color of their worst issue."""

    @staticmethod
    def block(
        title: str,
        body: RenderableType,
        style: str = UIStyle.BLUE.value,
        subtitle: str | None = None,
    ) -> Panel:
        return Panel(
            body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1)
        )

    @staticmethod
    def style_for(issues: Iterable[Issue], default: str = UIStyle.BLUE.value) -> str:
        present = {issue.severity for issue in issues}
        for severity in _SEVERITY_RANK:
            if severity in present:
                return SEVERITY_STYLE[severity]
        return default

    @classmethod
    def issues_block(
        cls, title: str, body: RenderableType, issues: list[Issue]
    ) -> Panel:
        return cls.block(
            title,
            body,
            style=cls.style_for(issues),
            subtitle=f"{len(issues)} issues" if issues else None,
        )
