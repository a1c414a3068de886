# -*- coding: utf-8 -*-
"""
calibration
===========

Mode-dependent defaults used by ResponseCoercer.

Two kinds of values per mode:
- per-field defaults: substituted for ONE missing/invalid field while the other
  valid fields of the reply are kept.
- fallback record: the complete AnalysisResult returned when the reply holds no
  usable JSON at all.

The active policy is a single table (no score shift for generous mode):

    mode      per-field score   fallback score   fallback labels
    critical  50                50               Expository / Deductive / Intermediate / Human
    generous  35                35               Expository / Deductive / Intermediate / Human

Callers that need another policy build their own ModeCalibration objects and
pass them to ResponseCoercer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from textanalyzer.analysis.types import (
    AnalysisMode,
    AnalysisResult,
    AuthorLikelihood,
    CompetenceLevel,
    WritingApproach,
    WritingStyle,
)


@dataclass(frozen=True)
class ModeCalibration:
    mode: AnalysisMode
    ai_probability: int
    writing_style: WritingStyle
    writing_approach: WritingApproach
    competence_level: CompetenceLevel
    author_likelihood: AuthorLikelihood
    comments_placeholder: str
    fallback: AnalysisResult


def _placeholder(mode: AnalysisMode) -> str:
    return f"Analysis completed with {mode.value} standards applied."


def _fallback_comment(mode: AnalysisMode) -> str:
    return (
        "Unable to complete full analysis due to a parsing error in the model reply. "
        f"Default {mode.value} mode values are shown."
    )


def _build(mode: AnalysisMode, ai_probability: int) -> ModeCalibration:
    return ModeCalibration(
        mode=mode,
        ai_probability=ai_probability,
        writing_style=WritingStyle.EXPOSITORY,
        writing_approach=WritingApproach.DEDUCTIVE,
        competence_level=CompetenceLevel.INTERMEDIATE,
        author_likelihood=AuthorLikelihood.HUMAN,
        comments_placeholder=_placeholder(mode),
        fallback=AnalysisResult(
            ai_probability=ai_probability,
            writing_style=WritingStyle.EXPOSITORY,
            writing_approach=WritingApproach.DEDUCTIVE,
            competence_level=CompetenceLevel.INTERMEDIATE,
            author_likelihood=AuthorLikelihood.HUMAN,
            comments=_fallback_comment(mode),
        ),
    )


DEFAULT_CALIBRATIONS: Dict[AnalysisMode, ModeCalibration] = {
    AnalysisMode.CRITICAL: _build(AnalysisMode.CRITICAL, 50),
    AnalysisMode.GENEROUS: _build(AnalysisMode.GENEROUS, 35),
}


def calibration_for(
    mode: AnalysisMode,
    calibrations: Dict[AnalysisMode, ModeCalibration] | None = None,
) -> ModeCalibration:
    table = calibrations if calibrations is not None else DEFAULT_CALIBRATIONS
    return table[mode]
