from enum import Enum

from rule_resolver.validation import IssueSeverity


class UIStyle(str, Enum):
    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


SEVERITY_STYLE = {
    IssueSeverity.ERROR: UIStyle.RED.value,
    IssueSeverity.WARNING: UIStyle.YELLOW.value,
    IssueSeverity.INFO: UIStyle.DIM.value,
}
