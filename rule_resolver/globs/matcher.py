"""Compile rule glob patterns into anchored, case-sensitive matchers.

Supported syntax:

* ``*`` matches any run of characters except ``/``.
* ``**`` matches any run of characters including ``/``; ``**/`` also matches
  zero directories, so ``**/*.py`` matches ``app.py``.
* ``?`` matches exactly one character except ``/``.

Every other character is literal. The whole candidate path must match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rule_resolver.constants import (
    DOUBLE_STAR_PENALTY,
    GLOB_ALLOWED_CHARS,
    GLOB_MAX_STAR_RUN,
    QUESTION_PENALTY,
    STAR_PENALTY,
)
from rule_resolver.errors import InvalidPatternError

_ALLOWED = frozenset(GLOB_ALLOWED_CHARS)
_STAR_RUN_RE = re.compile(r"\*+")


@dataclass(frozen=True)
class GlobMatcher:
    pattern: str
    regex: re.Pattern[str] = field(repr=False, compare=False)
    score: int = field(compare=False)

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None

    def specificity(self) -> int:
        return self.score


def compile_glob(pattern: str) -> GlobMatcher:
    _check_pattern(pattern)

    parts: list[str] = []
    literal_count = 0
    score_penalty = 0
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if pattern.startswith("**/", index):
            parts.append("(?:.*/)?")
            score_penalty += DOUBLE_STAR_PENALTY
            literal_count += 1
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            score_penalty += DOUBLE_STAR_PENALTY
            index += 2
        elif char == "*":
            parts.append("[^/]*")
            score_penalty += STAR_PENALTY
            index += 1
        elif char == "?":
            parts.append("[^/]")
            score_penalty += QUESTION_PENALTY
            index += 1
        else:
            parts.append(re.escape(char))
            literal_count += 1
            index += 1

    return GlobMatcher(
        pattern=pattern,
        regex=re.compile("".join(parts)),
        score=literal_count - score_penalty,
    )


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise InvalidPatternError(pattern, "empty pattern")

    invalid = sorted({char for char in pattern if char not in _ALLOWED})
    if invalid:
        shown = ", ".join(repr(char) for char in invalid)
        raise InvalidPatternError(pattern, f"unsupported characters {shown}")

    for run in _STAR_RUN_RE.findall(pattern):
        if len(run) > GLOB_MAX_STAR_RUN:
            raise InvalidPatternError(pattern, f"{len(run)} consecutive '*'")
