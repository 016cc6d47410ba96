"""
Score Kernel — Bendable Score v1.0

A score with a configurable number of hard and soft int32 levels.
The level counts are fixed per instance; the score definition that
produced it decides them.

────────────────────────────────────────────────
Canonical form:
    [<init>init][h0/h1/...]hard/[s0/s1/...]soft

    -1init[-2/0]hard/[3]soft
    [0/0]hard/[]soft
────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Tuple

from .compatibility import is_compatible, validate_compatible
from .int32 import (
    floor_to_int32,
    real_divide,
    real_power,
    validate_int32,
    wrap_int32,
)
from .score import LevelIndexError, Score


HARD_LABEL: str = "hard"
SOFT_LABEL: str = "soft"


def _to_levels(values: Iterable[int], name: str) -> Tuple[int, ...]:
    levels = tuple(values)
    for i, value in enumerate(levels):
        validate_int32(value, f"{name}[{i}]")
    return levels


def _check_index(index: int, size: int, name: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise LevelIndexError(
            f"{name} must be int, got {type(index).__name__}"
        )
    if index < 0 or index >= size:
        raise LevelIndexError(
            f"{name} ({index}) out of range: expected 0 <= {name} < {size}"
        )


@dataclass(frozen=True, eq=False, repr=False)
class BendableScore(Score):
    """
    Immutable bendable score.

    Build instances with :meth:`zero`, :meth:`of`, :meth:`of_uninitialized`
    or :meth:`parse_score`; the level tuples are never exposed directly.
    """

    init_score: int
    _hard_scores: Tuple[int, ...]
    _soft_scores: Tuple[int, ...]

    def __post_init__(self) -> None:
        validate_int32(self.init_score, "init_score")
        object.__setattr__(
            self, "_hard_scores", _to_levels(self._hard_scores, "hard_scores"),
        )
        object.__setattr__(
            self, "_soft_scores", _to_levels(self._soft_scores, "soft_scores"),
        )

    # -- Factories ----------------------------------------------------------

    @classmethod
    def zero(cls, hard_levels_count: int, soft_levels_count: int) -> "BendableScore":
        for name, count in (
            ("hard_levels_count", hard_levels_count),
            ("soft_levels_count", soft_levels_count),
        ):
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(
                    f"{name} must be int, got {type(count).__name__}"
                )
        if hard_levels_count < 0 or soft_levels_count < 0:
            raise ValueError(
                f"Level counts must be >= 0, got hard={hard_levels_count} "
                f"soft={soft_levels_count}"
            )
        return cls(0, (0,) * hard_levels_count, (0,) * soft_levels_count)

    @classmethod
    def of(
        cls, hard_scores: Iterable[int], soft_scores: Iterable[int],
    ) -> "BendableScore":
        return cls(0, tuple(hard_scores), tuple(soft_scores))

    @classmethod
    def of_uninitialized(
        cls,
        init_score: int,
        hard_scores: Iterable[int],
        soft_scores: Iterable[int],
    ) -> "BendableScore":
        return cls(init_score, tuple(hard_scores), tuple(soft_scores))

    @classmethod
    def parse_score(cls, score_string: str) -> "BendableScore":
        """Inverse of ``str(score)``."""
        from .parsing import parse_score

        return parse_score(score_string)

    # -- Accessors ----------------------------------------------------------

    @property
    def hard_scores(self) -> List[int]:
        """Copy of the hard levels."""
        return list(self._hard_scores)

    @property
    def soft_scores(self) -> List[int]:
        """Copy of the soft levels."""
        return list(self._soft_scores)

    def hard_levels_count(self) -> int:
        return len(self._hard_scores)

    def soft_levels_count(self) -> int:
        return len(self._soft_scores)

    def levels_count(self) -> int:
        return len(self._hard_scores) + len(self._soft_scores)

    def hard_score(self, hard_level: int) -> int:
        _check_index(hard_level, len(self._hard_scores), "hard_level")
        return self._hard_scores[hard_level]

    def soft_score(self, soft_level: int) -> int:
        _check_index(soft_level, len(self._soft_scores), "soft_level")
        return self._soft_scores[soft_level]

    def hard_or_soft_score(self, level: int) -> int:
        """
        Levels 0..H-1 address the hard levels, H..H+S-1 the soft levels.
        """
        _check_index(level, self.levels_count(), "level")
        hard_count = len(self._hard_scores)
        if level < hard_count:
            return self._hard_scores[level]
        return self._soft_scores[level - hard_count]

    def to_level_numbers(self) -> List[int]:
        return list(self._hard_scores) + list(self._soft_scores)

    # -- Init score ---------------------------------------------------------

    def to_initialized_score(self) -> "BendableScore":
        if self.init_score == 0:
            return self
        return replace(self, init_score=0)

    def with_init_score(self, new_init_score: int) -> "BendableScore":
        self._assert_no_init_score()
        return replace(self, init_score=new_init_score)

    def is_feasible(self) -> bool:
        if self.init_score < 0:
            return False
        return all(hard_score >= 0 for hard_score in self._hard_scores)

    # -- Arithmetic ---------------------------------------------------------

    def add(self, augment: "BendableScore") -> "BendableScore":
        validate_compatible(self, augment)
        return BendableScore(
            wrap_int32(self.init_score + augment.init_score),
            tuple(
                wrap_int32(a + b)
                for a, b in zip(self._hard_scores, augment._hard_scores)
            ),
            tuple(
                wrap_int32(a + b)
                for a, b in zip(self._soft_scores, augment._soft_scores)
            ),
        )

    def subtract(self, subtrahend: "BendableScore") -> "BendableScore":
        validate_compatible(self, subtrahend)
        return BendableScore(
            wrap_int32(self.init_score - subtrahend.init_score),
            tuple(
                wrap_int32(a - b)
                for a, b in zip(self._hard_scores, subtrahend._hard_scores)
            ),
            tuple(
                wrap_int32(a - b)
                for a, b in zip(self._soft_scores, subtrahend._soft_scores)
            ),
        )

    def multiply(self, multiplicand: float) -> "BendableScore":
        multiplicand = float(multiplicand)
        return self._map_levels(
            lambda level: floor_to_int32(level * multiplicand)
        )

    def divide(self, divisor: float) -> "BendableScore":
        return self._map_levels(
            lambda level: floor_to_int32(real_divide(level, divisor))
        )

    def power(self, exponent: float) -> "BendableScore":
        # Negative base with a fractional exponent gives nan, which narrows to 0.
        return self._map_levels(
            lambda level: floor_to_int32(real_power(level, exponent))
        )

    def negate(self) -> "BendableScore":
        return self._map_levels(lambda level: wrap_int32(-level))

    def _map_levels(self, fn: Callable[[int], int]) -> "BendableScore":
        return BendableScore(
            fn(self.init_score),
            tuple(fn(level) for level in self._hard_scores),
            tuple(fn(level) for level in self._soft_scores),
        )

    # -- Comparison ---------------------------------------------------------

    def validate_compatible(self, other: "BendableScore") -> None:
        validate_compatible(self, other)

    def is_compatible_arithmetic_argument(self, other: Score) -> bool:
        return is_compatible(self, other)

    def compare_to(self, other: "BendableScore") -> int:
        """
        Lexicographic: init score, then hard levels, then soft levels.
        First differing level decides.
        """
        validate_compatible(self, other)
        if self.init_score != other.init_score:
            return -1 if self.init_score < other.init_score else 1
        for mine, theirs in zip(self._hard_scores, other._hard_scores):
            if mine != theirs:
                return -1 if mine < theirs else 1
        for mine, theirs in zip(self._soft_scores, other._soft_scores):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BendableScore):
            return NotImplemented
        return (
            self.init_score == other.init_score
            and self._hard_scores == other._hard_scores
            and self._soft_scores == other._soft_scores
        )

    def __hash__(self) -> int:
        return hash((self.init_score, self._hard_scores, self._soft_scores))

    # -- Formatting ---------------------------------------------------------

    def __str__(self) -> str:
        hard = "/".join(str(level) for level in self._hard_scores)
        soft = "/".join(str(level) for level in self._soft_scores)
        return f"{self._init_prefix()}[{hard}]{HARD_LABEL}/[{soft}]{SOFT_LABEL}"

    def __repr__(self) -> str:
        return f"BendableScore('{self}')"

    def to_short_string(self) -> str:
        """
        Like ``str(score)`` but zero levels are dropped, and a level group
        with no nonzero level is dropped entirely. All zero -> ``"0"``.
        """
        parts: List[str] = []
        prefix = self._init_prefix()
        for levels, label in (
            (self._hard_scores, HARD_LABEL),
            (self._soft_scores, SOFT_LABEL),
        ):
            nonzero = [str(level) for level in levels if level != 0]
            if nonzero:
                parts.append(f"[{'/'.join(nonzero)}]{label}")
        if not prefix and not parts:
            return "0"
        return prefix + "/".join(parts)
