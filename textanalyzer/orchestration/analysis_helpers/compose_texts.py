# -*- coding: utf-8 -*-
"""
compose_texts
=============

Why this helper exists:
- The instructions sent to the model are long, text-heavy and come in two
  fixed variants (critical / generous). Keeping them here lets PromptBuilder
  read like a short story.
- The user message IS the schema contract: exact JSON keys, exact enum
  spellings, and an explicit "JSON only" rule.

What it does:
- `build_system_text(mode)` for the SYSTEM message.
- `build_user_text(question, answer_text, judging_criteria, mode)` for the
  USER message.
Both are pure string functions.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from textanalyzer.analysis.types import (
    AnalysisMode,
    AuthorLikelihood,
    CompetenceLevel,
    WritingApproach,
    WritingStyle,
    allowed_values,
)


SYSTEM_TEXTS: Dict[AnalysisMode, str] = {
    AnalysisMode.CRITICAL: (
        "You are a highly critical expert text analyst specializing in detecting AI-generated "
        "content. You have extensive experience in academic writing analysis and are known for "
        "your rigorous standards. Be thorough and demanding in your assessments."
    ),
    AnalysisMode.GENEROUS: (
        "You are a fair and balanced expert text analyst specializing in detecting AI-generated "
        "content. You have extensive experience in academic writing analysis. Give writers the "
        "benefit of the doubt and only flag AI generation when the evidence is clear."
    ),
}

INTRO_TEXTS: Dict[AnalysisMode, str] = {
    AnalysisMode.CRITICAL: (
        "You are a highly critical academic writing analyst. Analyze this text response with "
        "extreme scrutiny and provide a comprehensive evaluation. Be demanding in your standards "
        "and look for subtle signs of AI generation."
    ),
    AnalysisMode.GENEROUS: (
        "You are a fair academic writing analyst. Analyze this text response with an open mind "
        "and provide a comprehensive evaluation. Polished writing is not evidence of AI "
        "generation on its own."
    ),
}

APPROACH_BLOCKS: Dict[AnalysisMode, List[str]] = {
    AnalysisMode.CRITICAL: [
        "**CRITICAL ANALYSIS REQUIREMENTS:**",
        "You must be highly critical and thorough. Look for:",
        "- Generic phrases and cliched expressions",
        "- Perfect structure that lacks human spontaneity",
        "- Absence of personal voice or authentic mistakes",
        "- Overly balanced arguments without genuine bias",
        "- Formulaic transitions and conclusions",
        "- Lack of genuine emotional depth or personal experience",
    ],
    AnalysisMode.GENEROUS: [
        "**BALANCED ANALYSIS REQUIREMENTS:**",
        "Weigh the evidence fairly. Consider in the writer's favour:",
        "- Personal anecdotes, opinions or a recognisable individual voice",
        "- Natural variation in sentence length and rhythm",
        "- Minor errors, informal phrasing or digressions",
        "- Arguments that take a clear side",
        "Only count formulaic structure or generic phrasing as AI evidence when several signs appear together.",
    ],
}

CALIBRATION_GUIDELINES: Dict[AnalysisMode, List[str]] = {
    AnalysisMode.CRITICAL: [
        "**CALIBRATION GUIDELINES:**",
        "- 0-30: clear human markers (personal voice, natural errors, genuine spontaneity)",
        "- 31-60: mixed signals; state which signals point each way",
        "- 61-100: consistent AI markers (uniform structure, generic academic language)",
        "- When in doubt, lean towards the higher score.",
    ],
    AnalysisMode.GENEROUS: [
        "**CALIBRATION GUIDELINES:**",
        "- 0-40: plausibly human, including polished but personal writing",
        "- 41-70: several AI markers present together",
        "- 71-100: overwhelming, consistent AI markers",
        "- When in doubt, lean towards the lower score.",
    ],
}

PROBABILITY_CHECKS: Dict[AnalysisMode, List[str]] = {
    AnalysisMode.CRITICAL: [
        "1. **AI Probability (0-100%)**: Be critical. Look for:",
        "   - Repetitive sentence structures",
        "   - Generic academic language",
        "   - Perfect grammar without natural variation",
        "   - Lack of personal anecdotes or genuine errors",
        "   - Formulaic organization",
        "   - Missing authentic voice",
    ],
    AnalysisMode.GENEROUS: [
        "1. **AI Probability (0-100%)**: Be fair. Balance:",
        "   - Repetitive sentence structures against natural variation",
        "   - Generic academic language against a personal voice",
        "   - Formulaic organization against genuine reasoning",
    ],
}

COMMENT_GUIDANCE: Dict[AnalysisMode, str] = {
    AnalysisMode.CRITICAL: "6. **Comments**: Provide specific examples and harsh but fair criticism",
    AnalysisMode.GENEROUS: "6. **Comments**: Provide specific examples and constructive, balanced feedback",
}


def _one_of(values: List[str]) -> str:
    return ", ".join(values)


def build_system_text(mode: AnalysisMode) -> str:
    """
    Build the SYSTEM message content for the model.
    """
    lines: List[str] = [
        SYSTEM_TEXTS[mode],
        "You MUST respond with a single JSON object and nothing else (no prose, no markdown).",
    ]
    return "\n".join(lines)


def build_user_text(
    question: str,
    answer_text: str,
    judging_criteria: Optional[str],
    mode: AnalysisMode,
) -> str:
    """
    Build the USER message content: inputs, mode guidance, and the JSON schema.
    """
    styles = allowed_values(WritingStyle)
    approaches = allowed_values(WritingApproach)
    levels = allowed_values(CompetenceLevel)
    authors = allowed_values(AuthorLikelihood)

    lines: List[str] = [INTRO_TEXTS[mode], ""]

    lines.append("**Question/Prompt:**")
    lines.append(question)
    lines.append("")
    lines.append("**Answer Text to Analyze:**")
    lines.append(answer_text)
    lines.append("")

    if judging_criteria:
        lines.append("**Judging Criteria:**")
        lines.append(judging_criteria)
        lines.append("")

    lines.extend(APPROACH_BLOCKS[mode])
    lines.append("")
    lines.extend(CALIBRATION_GUIDELINES[mode])
    lines.append("")

    lines.append("**MANDATORY OUTPUT FORMAT:**")
    lines.append("Return your analysis in this exact JSON format with NO additional text:")
    lines.append("")
    lines.append("{")
    lines.append('  "aiProbability": <number 0-100>,')
    lines.append(f'  "writingStyle": "<EXACTLY ONE OF: {_one_of(styles)}>",')
    lines.append(f'  "writingApproach": "<EXACTLY ONE OF: {_one_of(approaches)}>",')
    lines.append(f'  "competenceLevel": "<EXACTLY ONE OF: {_one_of(levels)}>",')
    lines.append(f'  "authorLikelihood": "<EXACTLY: {" OR ".join(authors)}>",')
    lines.append('  "comments": "<detailed analysis explaining your reasoning>"')
    lines.append("}")
    lines.append("")

    lines.append("**CLASSIFICATION REQUIREMENTS:**")
    lines.append("")
    lines.extend(PROBABILITY_CHECKS[mode])
    lines.append("")
    lines.append(f"2. **Writing Style**: Choose the DOMINANT style from: {_one_of(styles)}")
    lines.append("")
    lines.append(
        f"3. **Writing Approach**: Choose the PRIMARY organizational method from: {_one_of(approaches)}"
    )
    lines.append("")
    lines.append("4. **Competence Level**:")
    lines.append("   - Basic: Simple vocabulary, basic structure, obvious errors")
    lines.append("   - Intermediate: Good structure, varied vocabulary, minor issues")
    lines.append("   - Advanced: Sophisticated language, complex ideas, polished")
    lines.append("   - Expert: Exceptional skill, nuanced understanding, masterful execution")
    lines.append("   - Formulaic: Following templates, predictable patterns, AI-like structure")
    lines.append("")
    lines.append(f"5. **Author Likelihood**: {' or '.join(authors)} based on your assessment")
    lines.append("")
    lines.append(COMMENT_GUIDANCE[mode])
    lines.append("")
    lines.append("Return ONLY the JSON object. No markdown formatting, no additional text.")

    return "\n".join(lines)
