"""
Score Kernel — Compatibility Validation v1.0

Hard-fail precondition shared by every binary score operation.
Two bendable scores are compatible iff they have the same number of hard
levels AND the same number of soft levels. Never padded, never truncated.

Equality and hashing do NOT go through this check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from .score import ScoreError

if TYPE_CHECKING:
    from .bendable_score import BendableScore


class IncompatibleScoreError(ScoreError, ValueError):
    """Raised when two scores with different level counts are combined."""

    def __init__(
        self,
        left: object,
        right: object,
        left_shape: Tuple[int, int] | None,
        right_shape: Tuple[int, int] | None,
        detail: str,
    ) -> None:
        self.left = left
        self.right = right
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(detail)


def _shape(score: object) -> Tuple[int, int] | None:
    from .bendable_score import BendableScore

    if not isinstance(score, BendableScore):
        return None
    return (score.hard_levels_count(), score.soft_levels_count())


def is_compatible(a: "BendableScore", b: "BendableScore") -> bool:
    """Predicate form of validate_compatible. Never raises."""
    left_shape = _shape(a)
    return left_shape is not None and left_shape == _shape(b)


def validate_compatible(a: "BendableScore", b: "BendableScore") -> None:
    """
    Raise IncompatibleScoreError unless a and b have identical
    hard and soft level counts. Symmetric in its operands.
    """
    left_shape = _shape(a)
    right_shape = _shape(b)

    if left_shape is None or right_shape is None:
        raise IncompatibleScoreError(
            a, b, left_shape, right_shape,
            f"The score ({a!s}) of type {type(a).__name__} is not compatible "
            f"with the other score ({b!s}) of type {type(b).__name__}"
        )
    if left_shape[0] != right_shape[0]:
        raise IncompatibleScoreError(
            a, b, left_shape, right_shape,
            f"The score ({a}) with hard_levels_count ({left_shape[0]}) is not "
            f"compatible with the other score ({b}) with hard_levels_count "
            f"({right_shape[0]})"
        )
    if left_shape[1] != right_shape[1]:
        raise IncompatibleScoreError(
            a, b, left_shape, right_shape,
            f"The score ({a}) with soft_levels_count ({left_shape[1]}) is not "
            f"compatible with the other score ({b}) with soft_levels_count "
            f"({right_shape[1]})"
        )
