from typing import Final


FRONT_MATTER_DELIMITER: Final[str] = "---"

RULES_DIRNAME: Final[str] = "rules"
RULE_FILE_SUFFIXES: Final[tuple[str, ...]] = (".md", ".mdc")

ID_KEY: Final[str] = "id"
DESCRIPTION_KEY: Final[str] = "description"
GLOBS_KEY: Final[str] = "globs"
MATCH_ALL_KEYS: Final[tuple[str, ...]] = ("matchAll", "alwaysApply")

TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "yes", "1"})
FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "no", "0", ""})

GLOB_ALLOWED_CHARS: Final[str] = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789*?./-_"
)
GLOB_MAX_STAR_RUN: Final[int] = 2

STAR_PENALTY: Final[int] = 2
DOUBLE_STAR_PENALTY: Final[int] = 4
QUESTION_PENALTY: Final[int] = 1
