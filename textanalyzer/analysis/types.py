# -*- coding: utf-8 -*-
"""
Analysis types — closed vocabularies and the request/result records.

Every label the model may return is a member of a str-valued Enum, so once a
reply has been coerced into an AnalysisResult no unvalidated string can be
carried along. The enum *values* are the exact spellings used in the prompt
and in the JSON wire format.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class AnalysisRequestError(ValueError):
    """Raised when a request is missing its question or answer text."""


class AnalysisMode(str, Enum):
    CRITICAL = "critical"
    GENEROUS = "generous"

    @classmethod
    def from_flag(cls, is_critical_mode: bool) -> "AnalysisMode":
        return cls.CRITICAL if is_critical_mode else cls.GENEROUS

    @property
    def is_critical(self) -> bool:
        return self is AnalysisMode.CRITICAL


class WritingStyle(str, Enum):
    NARRATIVE = "Narrative"
    EXPOSITORY = "Expository"
    DESCRIPTIVE = "Descriptive"
    PERSUASIVE = "Persuasive"
    ANALYTICAL = "Analytical"
    REFLECTIVE = "Reflective"
    SATIRICAL = "Satirical"
    DIDACTIC = "Didactic"


class WritingApproach(str, Enum):
    CHRONOLOGICAL = "Chronological"
    PROBLEM_SOLUTION = "Problem-Solution"
    COMPARE_CONTRAST = "Compare-Contrast"
    INDUCTIVE = "Inductive"
    DEDUCTIVE = "Deductive"
    STREAM_OF_CONSCIOUSNESS = "Stream of Consciousness"
    FRAGMENTED = "Fragmented"


class CompetenceLevel(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    FORMULAIC = "Formulaic"


class AuthorLikelihood(str, Enum):
    HUMAN = "Human"
    AI = "AI"


def allowed_values(enum_cls: type[Enum]) -> List[str]:
    """Option values in declaration order (this is also the prompt order)."""
    return [member.value for member in enum_cls]


@dataclass(frozen=True)
class AnalysisRequest:
    """
    Caller-supplied input for one analysis.

    question and answer_text must be non-empty before the request reaches the
    prompt builder; `validated()` is the check the controller uses.
    """
    question: str
    answer_text: str
    judging_criteria: Optional[str] = None
    mode: AnalysisMode = AnalysisMode.CRITICAL

    @property
    def criteria(self) -> Optional[str]:
        """Judging criteria, or None when absent or blank."""
        if self.judging_criteria is None:
            return None
        text = self.judging_criteria.strip()
        return text or None

    def validated(self) -> "AnalysisRequest":
        if not (self.question or "").strip() or not (self.answer_text or "").strip():
            raise AnalysisRequestError("Please provide both a question and answer text.")
        return self


@dataclass(frozen=True)
class AnalysisResult:
    ai_probability: int
    writing_style: WritingStyle
    writing_approach: WritingApproach
    competence_level: CompetenceLevel
    author_likelihood: AuthorLikelihood
    comments: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the model's JSON contract."""
        return {
            "aiProbability": self.ai_probability,
            "writingStyle": self.writing_style.value,
            "writingApproach": self.writing_approach.value,
            "competenceLevel": self.competence_level.value,
            "authorLikelihood": self.author_likelihood.value,
            "comments": self.comments,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """
        Rebuild a result that was previously written by `to_dict()`.

        Strict: unknown labels raise ValueError, out-of-range scores raise
        ValueError. Untrusted model output goes through ResponseCoercer instead.
        """
        probability = int(data["aiProbability"])
        if not 0 <= probability <= 100:
            raise ValueError(f"aiProbability out of range: {probability}")
        comments = str(data.get("comments") or "").strip()
        if not comments:
            raise ValueError("comments must not be empty")
        return cls(
            ai_probability=probability,
            writing_style=WritingStyle(data["writingStyle"]),
            writing_approach=WritingApproach(data["writingApproach"]),
            competence_level=CompetenceLevel(data["competenceLevel"]),
            author_likelihood=AuthorLikelihood(data["authorLikelihood"]),
            comments=comments,
        )
