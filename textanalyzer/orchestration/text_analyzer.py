# -*- coding: utf-8 -*-
"""
TextAnalyzer — runs one analysis end to end.

Job:
- Ask PromptBuilder for the SYSTEM + USER messages of the request.
- Call LLMClient with those messages (model settings from AnalyzerConfig).
- Hand the raw reply to ResponseCoercer and return the AnalysisResult.

This class stays thin:
- It does NOT know prompt wording (compose_texts does that).
- It does NOT parse JSON (ResponseCoercer does that).
- Only AnalysisUnavailable (from LLMClient) can escape it.
"""

from __future__ import annotations

import json
from typing import Optional

from textanalyzer.analysis.types import AnalysisRequest, AnalysisResult
from textanalyzer.orchestration.llm_client import LLMClient
from textanalyzer.orchestration.prompt_builder import PromptBuilder
from textanalyzer.orchestration.response_coercer import CoercionOutcome, ResponseCoercer
from textanalyzer.utils.logging import SimpleLogger


class TextAnalyzer:

    def __init__(
        self,
        llm_client: LLMClient,
        prompt_builder: Optional[PromptBuilder] = None,
        coercer: Optional[ResponseCoercer] = None,
    ) -> None:
        self._llm_client = llm_client
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._coercer = coercer or ResponseCoercer()

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        return self.analyze_with_outcome(request).result

    def analyze_with_outcome(self, request: AnalysisRequest) -> CoercionOutcome:
        """
        Main entry point.

        Raises:
            AnalysisUnavailable: the model call itself failed.
        """
        messages = self._prompt_builder.compose(request)

        SimpleLogger.info(f"TextAnalyzer → LLM messages ({request.mode.value} mode):")
        SimpleLogger.debug(json.dumps(messages, ensure_ascii=False, indent=2))

        raw_result = self._llm_client.chat(messages=messages)

        SimpleLogger.info("TextAnalyzer ← LLM raw result:")
        SimpleLogger.info(raw_result)

        outcome = self._coercer.coerce_with_outcome(raw_result, request.mode)
        if outcome.used_fallback:
            SimpleLogger.warning(f"TextAnalyzer: fallback record used ({outcome.status.value})")
        return outcome
