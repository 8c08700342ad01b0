from rule_resolver.tui.renderers import ReportConsoleUI

__all__ = ["ReportConsoleUI"]
