"""
Score Kernel — Diagnostics v1.0

Compute a diagnostic snapshot of a score, for logs and the CLI.
"""

from __future__ import annotations

from .bendable_score import BendableScore


def compute_diagnostics(score: BendableScore) -> dict:
    """
    Return a diagnostic dict summarising the score.
    broken_hard_levels lists the indexes of negative hard levels.
    """
    broken = [
        i for i, level in enumerate(score.hard_scores) if level < 0
    ]

    warnings: list[str] = []

    if not score.is_solution_initialized():
        warnings.append(
            f"Solution not initialized (init score {score.init_score})"
        )
    if broken:
        warnings.append(
            f"{len(broken)} broken hard level(s): "
            f"{', '.join(str(i) for i in broken)}"
        )

    return {
        "score": str(score),
        "short": score.to_short_string(),
        "init_score": score.init_score,
        "hard_levels_count": score.hard_levels_count(),
        "soft_levels_count": score.soft_levels_count(),
        "feasible": score.is_feasible(),
        "solution_initialized": score.is_solution_initialized(),
        "broken_hard_levels": broken,
        "warnings": warnings,
    }
