# -*- coding: utf-8 -*-
"""
ResponseCoercer
===============
Turns an arbitrary model reply into a well-typed AnalysisResult.

Per call:
  1. strip code fences        (json_parser)
  2. locate '{' ... '}'       → NO_JSON_FOUND on failure
  3. json.loads               → MALFORMED_JSON on failure
  4. normalize every field    (field_normalizer, per-field mode defaults)
  5. success                  → OK
  6. any failure in 2/3, or an unexpected exception in 4
                              → the mode's complete fallback record

coerce() never raises. Non-OK outcomes log the raw reply so it is not lost.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from textanalyzer.analysis.calibration import ModeCalibration, calibration_for
from textanalyzer.analysis.types import (
    AnalysisMode,
    AnalysisResult,
    AuthorLikelihood,
    CompetenceLevel,
    WritingApproach,
    WritingStyle,
)
from textanalyzer.orchestration.analysis_helpers.field_normalizer import (
    normalize_comments,
    normalize_enum,
    normalize_probability,
)
from textanalyzer.orchestration.analysis_helpers.json_parser import (
    ExtractionStatus,
    extract_json_object,
)
from textanalyzer.utils.logging import SimpleLogger


class CoercionStatus(str, Enum):
    OK = "ok"
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"
    VALIDATION_FALLBACK = "validation_fallback"


@dataclass(frozen=True)
class CoercionOutcome:
    status: CoercionStatus
    result: AnalysisResult
    detail: str = ""

    @property
    def used_fallback(self) -> bool:
        return self.status is not CoercionStatus.OK


_EXTRACTION_TO_STATUS = {
    ExtractionStatus.NO_JSON_FOUND: CoercionStatus.NO_JSON_FOUND,
    ExtractionStatus.MALFORMED_JSON: CoercionStatus.MALFORMED_JSON,
}


class ResponseCoercer:
    """
    Stateless reply parser.

    calibrations:
        Optional replacement for the default mode table
        (see textanalyzer.analysis.calibration). Read-only after construction.
    """

    def __init__(self, calibrations: Optional[Dict[AnalysisMode, ModeCalibration]] = None) -> None:
        self._calibrations = calibrations

    def calibration(self, mode: AnalysisMode) -> ModeCalibration:
        return calibration_for(mode, self._calibrations)

    def fallback(self, mode: AnalysisMode) -> AnalysisResult:
        return self.calibration(mode).fallback

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def coerce(self, raw_output: Any, mode: AnalysisMode) -> AnalysisResult:
        return self.coerce_with_outcome(raw_output, mode).result

    def coerce_with_outcome(self, raw_output: Any, mode: AnalysisMode) -> CoercionOutcome:
        calib = self.calibration(mode)

        try:
            extraction = extract_json_object(raw_output)
            if not extraction.ok or extraction.data is None:
                status = _EXTRACTION_TO_STATUS.get(extraction.status, CoercionStatus.MALFORMED_JSON)
                return self._fallback_outcome(status, calib, raw_output, extraction.error)

            result = self._normalize(extraction.data, calib)
        except Exception as exc:
            return self._fallback_outcome(
                CoercionStatus.VALIDATION_FALLBACK, calib, raw_output, f"{type(exc).__name__}: {exc}"
            )

        return CoercionOutcome(status=CoercionStatus.OK, result=result)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize(data: Dict[str, Any], calib: ModeCalibration) -> AnalysisResult:
        return AnalysisResult(
            ai_probability=normalize_probability(
                "aiProbability", data.get("aiProbability"), calib.ai_probability
            ),
            writing_style=normalize_enum(
                "writingStyle", data.get("writingStyle"), WritingStyle, calib.writing_style
            ),
            writing_approach=normalize_enum(
                "writingApproach", data.get("writingApproach"), WritingApproach, calib.writing_approach
            ),
            competence_level=normalize_enum(
                "competenceLevel", data.get("competenceLevel"), CompetenceLevel, calib.competence_level
            ),
            author_likelihood=normalize_enum(
                "authorLikelihood", data.get("authorLikelihood"), AuthorLikelihood, calib.author_likelihood
            ),
            comments=normalize_comments(data.get("comments"), calib.comments_placeholder),
        )

    @staticmethod
    def _fallback_outcome(
        status: CoercionStatus,
        calib: ModeCalibration,
        raw_output: Any,
        detail: str,
    ) -> CoercionOutcome:
        SimpleLogger.error(
            f"ResponseCoercer: {status.value} ({detail}); returning {calib.mode.value} fallback record"
        )
        SimpleLogger.error(f"ResponseCoercer: raw reply was: {raw_output!r}")
        return CoercionOutcome(status=status, result=calib.fallback, detail=detail)
