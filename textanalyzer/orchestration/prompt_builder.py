# -*- coding: utf-8 -*-
"""
PromptBuilder
=============
Renders the chat messages for one analysis request.

- Pure: no I/O, no randomness, no state between calls; the same request
  always yields byte-identical messages.
- Mode picks one of two fixed instruction variants (critical / generous).
- Precondition: question and answer_text are non-empty. The caller checks
  this (AnalysisRequest.validated()); PromptBuilder does not.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from textanalyzer.analysis.types import AnalysisRequest
from textanalyzer.orchestration.analysis_helpers.compose_texts import (
    build_system_text,
    build_user_text,
)


class PromptBuilder:

    def build(self, request: AnalysisRequest) -> Tuple[str, str]:
        """Return (system message, user message)."""
        system_text = build_system_text(request.mode)
        user_text = build_user_text(
            question=request.question,
            answer_text=request.answer_text,
            judging_criteria=request.criteria,
            mode=request.mode,
        )
        return system_text, user_text

    def compose(self, request: AnalysisRequest) -> List[Dict[str, str]]:
        """Build the SYSTEM + USER chat messages for the transport."""
        system_text, user_text = self.build(request)
        return [
            {"role": "system", "content": system_text},
            {"role": "user", "content": user_text},
        ]
