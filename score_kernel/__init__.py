"""
Score Kernel v1.0
Immutable bendable multi-level scores for constraint optimization.
All levels: int32 with native wraparound.
"""

from .score import (
    Score,
    ScoreError,
    InitScoreStateError,
    LevelIndexError,
    LevelRangeError,
)
from .int32 import INT32_MIN, INT32_MAX
from .compatibility import IncompatibleScoreError, is_compatible, validate_compatible
from .bendable_score import BendableScore
from .parsing import ScoreParseError, parse_score
from .snapshot import (
    SnapshotError,
    SerializationError,
    DeserializationError,
    encode_score,
    decode_score,
    score_hash,
)
from .diagnostics import compute_diagnostics

__all__ = [
    "Score",
    "ScoreError",
    "InitScoreStateError",
    "LevelIndexError",
    "LevelRangeError",
    "INT32_MIN",
    "INT32_MAX",
    "IncompatibleScoreError",
    "is_compatible",
    "validate_compatible",
    "BendableScore",
    "ScoreParseError",
    "parse_score",
    "SnapshotError",
    "SerializationError",
    "DeserializationError",
    "encode_score",
    "decode_score",
    "score_hash",
    "compute_diagnostics",
]
