import pytest

from textanalyzer.analysis.types import WritingApproach, WritingStyle
from textanalyzer.orchestration.analysis_helpers.field_normalizer import (
    normalize_comments,
    normalize_enum,
    normalize_probability,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, 0),
        (42, 42),
        (100, 100),
        (-5, 0),
        (120, 100),
        (67.6, 68),
        ("85", 85),
        (" 73% ", 73),
        ("250", 100),
    ],
)
def test_normalize_probability_clamps_numbers(raw, expected):
    assert normalize_probability("aiProbability", raw, 50) == expected


@pytest.mark.parametrize("raw", [None, "high", "", True, False, float("nan"), float("inf"), [80], {"v": 1}])
def test_normalize_probability_uses_default_for_non_numeric(raw):
    assert normalize_probability("aiProbability", raw, 35) == 35


def test_normalize_enum_keeps_exact_members():
    assert normalize_enum("writingStyle", "Satirical", WritingStyle, WritingStyle.EXPOSITORY) is WritingStyle.SATIRICAL
    assert (
        normalize_enum("writingApproach", "Stream of Consciousness", WritingApproach, WritingApproach.DEDUCTIVE)
        is WritingApproach.STREAM_OF_CONSCIOUSNESS
    )


@pytest.mark.parametrize("raw", ["Bogus", "analytical", None, 3, ["Analytical"]])
def test_normalize_enum_replaces_invalid_values(raw):
    assert normalize_enum("writingStyle", raw, WritingStyle, WritingStyle.EXPOSITORY) is WritingStyle.EXPOSITORY


def test_normalize_comments():
    assert normalize_comments("  Clear personal voice.  ", "placeholder") == "Clear personal voice."
    assert normalize_comments("", "placeholder") == "placeholder"
    assert normalize_comments("   ", "placeholder") == "placeholder"
    assert normalize_comments(None, "placeholder") == "placeholder"
    assert normalize_comments(42, "placeholder") == "placeholder"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(10**400, 100), (-(10**400), 0), ("9" * 400, 100), ("-" + "9" * 400, 0)],
)
def test_normalize_probability_clamps_huge_integers(raw, expected):
    assert normalize_probability("aiProbability", raw, 50) == expected
