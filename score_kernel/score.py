"""
Score Kernel — Score Capability Interface v1.0

Every score shape (bendable, simple, hard/soft, ...) implements this
interface so that a search engine can stay generic over the shape.

Contract:
  - Immutable. Every worker method returns a new instance.
  - init_score: 0 for a fully initialized solution, negative while
    planning variables remain unassigned.
  - Levels are ordered; level 0 has the highest priority.
  - Higher is better for every level.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


# ══════════════════════════════════════════════════════════════
# Exception Hierarchy
# ══════════════════════════════════════════════════════════════

class ScoreError(Exception):
    """Base exception for all score kernel operations."""


class InitScoreStateError(ScoreError, RuntimeError):
    """Raised when an init score is assigned to a score that already has one."""


class LevelIndexError(ScoreError, IndexError):
    """Raised when a level accessor is given an index outside its range."""


class LevelRangeError(ScoreError, ValueError):
    """Raised when a level value is not an int32."""


# ══════════════════════════════════════════════════════════════
# Interface
# ══════════════════════════════════════════════════════════════

INIT_LABEL: str = "init"


class Score(ABC):
    """
    Abstract score. Subclasses provide ``init_score`` and the level data.

    Python operators map onto the worker methods:
    ``a + b``, ``a - b``, ``a * f``, ``a / d``, ``a ** e``, ``-a`` and
    ``< <= > >=`` (through :meth:`compare_to`).
    """

    init_score: int

    # -- Levels -------------------------------------------------------------

    @abstractmethod
    def levels_count(self) -> int:
        """Number of levels, init score excluded."""

    @abstractmethod
    def hard_or_soft_score(self, level: int) -> int:
        """Level value by overall level index. Higher is better."""

    @abstractmethod
    def to_level_numbers(self) -> List[int]:
        """All levels in priority order, init score excluded."""

    # -- Init score ---------------------------------------------------------

    @abstractmethod
    def to_initialized_score(self) -> "Score":
        ...

    @abstractmethod
    def with_init_score(self, new_init_score: int) -> "Score":
        ...

    def is_solution_initialized(self) -> bool:
        """True when every planning variable has been assigned."""
        return self.init_score >= 0

    @abstractmethod
    def is_feasible(self) -> bool:
        ...

    # -- Arithmetic ---------------------------------------------------------

    @abstractmethod
    def add(self, augment: "Score") -> "Score":
        ...

    @abstractmethod
    def subtract(self, subtrahend: "Score") -> "Score":
        ...

    @abstractmethod
    def multiply(self, multiplicand: float) -> "Score":
        ...

    @abstractmethod
    def divide(self, divisor: float) -> "Score":
        ...

    @abstractmethod
    def power(self, exponent: float) -> "Score":
        ...

    @abstractmethod
    def negate(self) -> "Score":
        ...

    # -- Comparison / formatting -------------------------------------------

    @abstractmethod
    def compare_to(self, other: "Score") -> int:
        """-1, 0 or 1. Raises when the other score is not compatible."""

    @abstractmethod
    def is_compatible_arithmetic_argument(self, other: "Score") -> bool:
        ...

    @abstractmethod
    def to_short_string(self) -> str:
        """Compact rendering for logs. Zero levels are left out."""

    def _init_prefix(self) -> str:
        if self.init_score == 0:
            return ""
        return f"{self.init_score}{INIT_LABEL}"

    def _assert_no_init_score(self) -> None:
        if self.init_score != 0:
            raise InitScoreStateError(
                f"The score ({self}) was already initialized with an "
                f"init score ({self.init_score})"
            )

    # -- Operators ----------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, bool) or not isinstance(divisor, (int, float)):
            return NotImplemented
        return self.divide(divisor)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self):
        return self.negate()

    def __lt__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self.compare_to(other) >= 0
