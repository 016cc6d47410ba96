# file: score_kernel/snapshot.py
"""
Score Kernel — Score Snapshot Encoder / Decoder v1.0

Explicit JSON boundary around the canonical score string.

    {"hard_levels_count":2,"score":"-1init[-2/0]hard/[3]soft",
     "soft_levels_count":1,"type":"bendable"}

Rules:
  - Keys sorted, no whitespace, UTF-8. Byte-identical for equal scores.
  - Level counts are stored next to the score string and must agree with it.
  - No defaults injected. No coercion. Unknown fields rejected.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Dict

from .bendable_score import BendableScore
from .parsing import ScoreParseError, parse_score
from .score import ScoreError

logger = logging.getLogger(__name__)

SCORE_TYPE: str = "bendable"


# ══════════════════════════════════════════════════════════════
# Exception Hierarchy
# ══════════════════════════════════════════════════════════════

class SnapshotError(ScoreError):
    """Base exception for all score snapshot operations."""


class SerializationError(SnapshotError):
    """Raised when encoding a score to JSON fails."""


class DeserializationError(SnapshotError):
    """Raised when decoding JSON to a score fails."""


# ══════════════════════════════════════════════════════════════
# Encoder
# ══════════════════════════════════════════════════════════════

def encode_score(score: BendableScore) -> str:
    """
    Serialize a BendableScore into a canonical JSON string.
    """
    if not isinstance(score, BendableScore):
        raise SerializationError(
            f"Expected BendableScore, got {type(score).__name__}"
        )
    obj = {
        "hard_levels_count": score.hard_levels_count(),
        "score": str(score),
        "soft_levels_count": score.soft_levels_count(),
        "type": SCORE_TYPE,
    }
    return json.dumps(
        obj,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
    )


# ══════════════════════════════════════════════════════════════
# Decoder
# ══════════════════════════════════════════════════════════════

_SNAPSHOT_FIELDS = frozenset({
    "hard_levels_count", "score", "soft_levels_count", "type",
})


def decode_score(json_str: str) -> BendableScore:
    """
    Strict deserialization of a score snapshot.

    Fails on: invalid JSON, missing fields, unknown fields, wrong types,
    unknown score type, unparseable score string, level count mismatch.
    """
    try:
        raw = json.loads(json_str)
    except (TypeError, json.JSONDecodeError) as exc:
        raise DeserializationError(f"Invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise DeserializationError(
            f"Top-level JSON must be object, got {type(raw).__name__}"
        )
    _check_fields(raw, _SNAPSHOT_FIELDS, "score snapshot")

    if raw["type"] != SCORE_TYPE:
        raise DeserializationError(
            f"Unsupported score type {raw['type']!r}, expected {SCORE_TYPE!r}"
        )
    for name in ("hard_levels_count", "soft_levels_count"):
        _require_count(raw, name)
    if not isinstance(raw["score"], str):
        raise DeserializationError(
            f"'score' must be string, got {type(raw['score']).__name__}"
        )

    try:
        score = parse_score(
            raw["score"],
            hard_levels_count=raw["hard_levels_count"],
            soft_levels_count=raw["soft_levels_count"],
        )
    except ScoreParseError as exc:
        raise DeserializationError(f"Invalid score in snapshot: {exc}") from exc

    logger.debug("Decoded score snapshot %s", score)
    return score


# ══════════════════════════════════════════════════════════════
# Integrity Hash
# ══════════════════════════════════════════════════════════════

def score_hash(score: BendableScore) -> str:
    """
    SHA-256 of the canonical snapshot bytes. Lowercase hex. Deterministic.
    """
    return hashlib.sha256(encode_score(score).encode("utf-8")).hexdigest()


# ══════════════════════════════════════════════════════════════
# Internal Validation Helpers
# ══════════════════════════════════════════════════════════════

def _check_fields(data: Dict[str, Any], expected: frozenset, context: str) -> None:
    """Fail if data has missing or unknown fields vs expected set."""
    actual = set(data.keys())
    missing = expected - actual
    unknown = actual - expected
    if missing:
        raise DeserializationError(
            f"Missing fields in {context}: {sorted(missing)}"
        )
    if unknown:
        raise DeserializationError(
            f"Unknown fields in {context}: {sorted(unknown)}"
        )


def _require_count(data: Dict[str, Any], name: str) -> None:
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(
            f"Field '{name}' must be int, got {type(value).__name__}"
        )
    if value < 0:
        raise DeserializationError(
            f"Field '{name}' must be >= 0, got {value}"
        )
