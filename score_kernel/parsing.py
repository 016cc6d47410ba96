"""
Score Kernel — Score Parser v1.0

Strict inverse of ``str(BendableScore)``.

Rules:
  - Optional "<int>init" prefix. A "/" right after the label is accepted
    (legacy form) but never produced.
  - Then "[" hard levels "]hard/[" soft levels "]soft", nothing else.
  - Levels separated by "/"; empty brackets mean zero levels.
  - Every token is a signed decimal int32. No whitespace, no coercion.
  - Fails on the first bad token with the token and the full input.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .bendable_score import HARD_LABEL, SOFT_LABEL, BendableScore
from .int32 import INT32_MAX, INT32_MIN
from .score import INIT_LABEL, ScoreError

logger = logging.getLogger(__name__)

_LEVEL_PATTERN = re.compile(r"[+-]?[0-9]+")

_HARD_SEPARATOR: str = f"]{HARD_LABEL}/["
_SOFT_SUFFIX: str = f"]{SOFT_LABEL}"


class ScoreParseError(ScoreError, ValueError):
    """Raised when a score string is structurally invalid or non-numeric."""

    def __init__(self, score_string: str, token: str, reason: str) -> None:
        self.score_string = score_string
        self.token = token
        self.reason = reason
        super().__init__(
            f"The score string ({score_string!r}) for BendableScore has "
            f"an invalid segment ({token!r}): {reason}"
        )


def parse_score(
    score_string: str,
    hard_levels_count: Optional[int] = None,
    soft_levels_count: Optional[int] = None,
) -> BendableScore:
    """
    Parse the canonical form back into a BendableScore.

    If hard_levels_count / soft_levels_count are given the parsed level
    counts must match them.
    """
    if not isinstance(score_string, str):
        raise ScoreParseError(
            repr(score_string), "",
            f"expected str, got {type(score_string).__name__}",
        )
    try:
        score = _parse(score_string)
        _check_count(
            score_string, HARD_LABEL, score.hard_levels_count(), hard_levels_count,
        )
        _check_count(
            score_string, SOFT_LABEL, score.soft_levels_count(), soft_levels_count,
        )
    except ScoreParseError as exc:
        logger.debug("Rejected score string %r: %s", score_string, exc.reason)
        raise
    return score


# ══════════════════════════════════════════════════════════════
# Internal
# ══════════════════════════════════════════════════════════════

def _parse(score_string: str) -> BendableScore:
    init_score = 0
    rest = score_string
    if not score_string.startswith("["):
        label_at = score_string.find(INIT_LABEL)
        if label_at < 0:
            raise ScoreParseError(
                score_string, score_string,
                "must start with '[' or an init score prefix "
                f"'<int>{INIT_LABEL}'",
            )
        init_score = _parse_level(
            score_string, score_string[:label_at], "init score",
        )
        rest = score_string[label_at + len(INIT_LABEL):]
        if rest.startswith("/"):
            rest = rest[1:]

    if not rest.startswith("["):
        raise ScoreParseError(
            score_string, rest, "hard levels must start with '['",
        )
    separator_at = rest.find(_HARD_SEPARATOR)
    if separator_at < 0:
        raise ScoreParseError(
            score_string, rest, f"missing {_HARD_SEPARATOR!r}",
        )
    if not rest.endswith(_SOFT_SUFFIX):
        raise ScoreParseError(
            score_string, rest, f"must end with {_SOFT_SUFFIX!r}",
        )
    soft_start = separator_at + len(_HARD_SEPARATOR)
    soft_end = len(rest) - len(_SOFT_SUFFIX)
    if soft_start > soft_end:
        raise ScoreParseError(
            score_string, rest, "soft levels are not bracketed",
        )

    hard_scores = _parse_levels(score_string, rest[1:separator_at], HARD_LABEL)
    soft_scores = _parse_levels(score_string, rest[soft_start:soft_end], SOFT_LABEL)
    return BendableScore.of_uninitialized(init_score, hard_scores, soft_scores)


def _parse_levels(score_string: str, body: str, label: str) -> List[int]:
    if body == "":
        return []
    return [
        _parse_level(score_string, token, f"{label} level {i}")
        for i, token in enumerate(body.split("/"))
    ]


def _parse_level(score_string: str, token: str, what: str) -> int:
    if not _LEVEL_PATTERN.fullmatch(token):
        raise ScoreParseError(
            score_string, token, f"{what} is not a valid integer",
        )
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        raise ScoreParseError(
            score_string, token, f"{what} is out of int32 range",
        )
    return value


def _check_count(
    score_string: str, label: str, actual: int, expected: Optional[int],
) -> None:
    if expected is not None and actual != expected:
        raise ScoreParseError(
            score_string, label,
            f"expected {expected} {label} level(s), got {actual}",
        )
