# file: score_kernel/test_parsing.py
"""
Score Kernel — Parser Tests

10 deterministic tests:
  1-4:   Round-trip and accepted forms
  5-10:  Malformed input

Run:  python -m score_kernel.test_parsing
"""

from __future__ import annotations

import sys

from score_kernel.bendable_score import BendableScore
from score_kernel.int32 import INT32_MAX, INT32_MIN
from score_kernel.parsing import ScoreParseError, parse_score
from score_kernel.score import ScoreError


def _header(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def _expect_parse_error(text: str, token: str | None = None, **counts) -> ScoreParseError:
    try:
        parse_score(text, **counts)
    except ScoreParseError as e:
        print(f"  Caught: {e}")
        assert isinstance(e, ValueError)
        assert isinstance(e, ScoreError)
        assert e.score_string == text
        assert repr(text) in str(e), "message must echo the input"
        if token is not None:
            assert e.token == token, f"token {e.token!r} != {token!r}"
            assert repr(token) in str(e), "message must name the token"
        return e
    raise AssertionError(f"Expected ScoreParseError for {text!r}")


# ══════════════════════════════════════════════════════════════
# Accepted input (1 – 4)
# ══════════════════════════════════════════════════════════════

def test_01_round_trip() -> None:
    """parse(str(score)) == score for a spread of shapes."""
    _header("Test 01 — Round-trip")
    scores = [
        BendableScore.zero(0, 0),
        BendableScore.zero(2, 1),
        BendableScore.of([], [5, -6]),
        BendableScore.of([-7], []),
        BendableScore.of_uninitialized(-1, [-2, 0], [3]),
        BendableScore.of_uninitialized(12, [0], [0, 0, 0]),
        BendableScore.of_uninitialized(INT32_MIN, [INT32_MAX, INT32_MIN], [INT32_MAX]),
    ]
    for score in scores:
        text = str(score)
        parsed = parse_score(text)
        assert parsed == score, f"{text!r} -> {parsed!r}"
        assert str(parsed) == text
    print("  [PASS]")


def test_02_canonical_example() -> None:
    _header("Test 02 — Canonical example")
    parsed = parse_score("-1init[-2/0]hard/[3]soft")
    assert parsed.init_score == -1
    assert parsed.hard_scores == [-2, 0]
    assert parsed.soft_scores == [3]
    assert parsed == BendableScore.of_uninitialized(-1, [-2, 0], [3])
    assert not parsed.is_feasible()
    print("  [PASS]")


def test_03_lenient_forms() -> None:
    """Legacy 'init/' separator and explicit '+' signs are accepted."""
    _header("Test 03 — Lenient forms")
    assert parse_score("-1init/[-2/0]hard/[3]soft") == \
        BendableScore.of_uninitialized(-1, [-2, 0], [3])
    assert parse_score("[+5]hard/[-0]soft") == BendableScore.of([5], [0])
    assert parse_score("0init[1]hard/[2]soft") == BendableScore.of([1], [2])
    print("  [PASS]")


def test_04_expected_level_counts() -> None:
    """Optional level counts are enforced when given."""
    _header("Test 04 — Expected level counts")
    score = parse_score("[1/2]hard/[3]soft", hard_levels_count=2, soft_levels_count=1)
    assert score == BendableScore.of([1, 2], [3])
    _expect_parse_error("[1/2]hard/[3]soft", "hard", hard_levels_count=3)
    _expect_parse_error("[1/2]hard/[3]soft", "soft", soft_levels_count=0)
    print("  [PASS]")


# ══════════════════════════════════════════════════════════════
# Malformed input (5 – 10)
# ══════════════════════════════════════════════════════════════

def test_05_non_integer_token() -> None:
    _header("Test 05 — Non-integer token")
    _expect_parse_error("[1/a]hard/[2]soft", "a")
    _expect_parse_error("[1]hard/[2.5]soft", "2.5")
    _expect_parse_error("[1]hard/[ 2]soft", " 2")
    _expect_parse_error("xinit[1]hard/[2]soft", "x")
    print("  [PASS]")


def test_06_empty_token() -> None:
    _header("Test 06 — Empty level token")
    _expect_parse_error("[1//2]hard/[0]soft", "")
    _expect_parse_error("[1]hard/[0/]soft", "")
    _expect_parse_error("init[1]hard/[0]soft", "")
    print("  [PASS]")


def test_07_out_of_int32_range() -> None:
    _header("Test 07 — Out of int32 range")
    _expect_parse_error("[2147483648]hard/[]soft", "2147483648")
    _expect_parse_error("[]hard/[-2147483649]soft", "-2147483649")
    assert parse_score("[2147483647]hard/[-2147483648]soft") == \
        BendableScore.of([INT32_MAX], [INT32_MIN])
    print("  [PASS]")


def test_08_bracket_structure() -> None:
    _header("Test 08 — Bracket structure")
    for bad in (
        "",
        "[1]hard",
        "[1]hard/[2]",
        "1]hard/[2]soft",
        "[1]hard/[2]soft ",
        " [1]hard/[2]soft",
        "[1]soft/[2]hard",
        "-1init1]hard/[2]soft",
    ):
        _expect_parse_error(bad)
    print("  [PASS]")


def test_09_extra_segments() -> None:
    """A third group leaks into the soft body and fails on its token."""
    _header("Test 09 — Extra segments")
    _expect_parse_error("[1]hard/[2]soft/[3]soft", "2]soft")
    print("  [PASS]")


def test_10_non_string_input() -> None:
    _header("Test 10 — Non-string input")
    try:
        parse_score(None)  # type: ignore[arg-type]
    except ScoreParseError as e:
        print(f"  Caught: {e}")
    else:
        raise AssertionError("Expected ScoreParseError")
    print("  [PASS]")


# ══════════════════════════════════════════════════════════════
# Runner
# ══════════════════════════════════════════════════════════════

def main() -> None:
    tests = [
        test_01_round_trip,
        test_02_canonical_example,
        test_03_lenient_forms,
        test_04_expected_level_counts,
        test_05_non_integer_token,
        test_06_empty_token,
        test_07_out_of_int32_range,
        test_08_bracket_structure,
        test_09_extra_segments,
        test_10_non_string_input,
    ]
    results = []
    for fn in tests:
        try:
            fn()
            results.append(True)
        except Exception as e:
            print(f"\n[ERROR] {fn.__name__}: {e}")
            import traceback
            traceback.print_exc()
            results.append(False)

    passed = sum(results)
    total = len(results)
    print(f"\n{'='*60}")
    print(f"  RESULTS: {passed}/{total} tests passed")
    print(f"{'='*60}")
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
