import dataclasses

import pytest

from textanalyzer.analysis.types import (
    AnalysisMode,
    AnalysisRequest,
    AnalysisRequestError,
    AnalysisResult,
    AuthorLikelihood,
    CompetenceLevel,
    WritingApproach,
    WritingStyle,
    allowed_values,
)

RESULT = AnalysisResult(
    ai_probability=30,
    writing_style=WritingStyle.NARRATIVE,
    writing_approach=WritingApproach.INDUCTIVE,
    competence_level=CompetenceLevel.EXPERT,
    author_likelihood=AuthorLikelihood.HUMAN,
    comments="Vivid, first-person detail.",
)


def test_enum_vocabularies():
    assert allowed_values(WritingStyle) == [
        "Narrative", "Expository", "Descriptive", "Persuasive",
        "Analytical", "Reflective", "Satirical", "Didactic",
    ]
    assert allowed_values(WritingApproach) == [
        "Chronological", "Problem-Solution", "Compare-Contrast", "Inductive",
        "Deductive", "Stream of Consciousness", "Fragmented",
    ]
    assert allowed_values(CompetenceLevel) == ["Basic", "Intermediate", "Advanced", "Expert", "Formulaic"]
    assert allowed_values(AuthorLikelihood) == ["Human", "AI"]


def test_mode_from_flag():
    assert AnalysisMode.from_flag(True) is AnalysisMode.CRITICAL
    assert AnalysisMode.from_flag(False) is AnalysisMode.GENEROUS
    assert AnalysisMode.CRITICAL.is_critical
    assert not AnalysisMode.GENEROUS.is_critical


def test_result_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RESULT.ai_probability = 99  # type: ignore[misc]


def test_result_dict_round_trip_and_strictness():
    assert AnalysisResult.from_dict(RESULT.to_dict()) == RESULT

    with pytest.raises(ValueError):
        AnalysisResult.from_dict(dict(RESULT.to_dict(), writingStyle="Bogus"))
    with pytest.raises(ValueError):
        AnalysisResult.from_dict(dict(RESULT.to_dict(), aiProbability=101))


def test_request_validation_and_criteria():
    with pytest.raises(AnalysisRequestError):
        AnalysisRequest(question=" ", answer_text="text").validated()

    request = AnalysisRequest(question="q", answer_text="a", judging_criteria="  ")
    assert request.validated() is request
    assert request.criteria is None
    assert AnalysisRequest(question="q", answer_text="a", judging_criteria=" Clarity ").criteria == "Clarity"
