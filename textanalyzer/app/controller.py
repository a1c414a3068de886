# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List, Optional

from textanalyzer.analysis.types import AnalysisMode, AnalysisRequest, AnalysisResult
from textanalyzer.config.settings import AnalyzerConfig
from textanalyzer.ingestion.ocr import extract_text_from_image
from textanalyzer.memory.history_store import HistoryEntry, HistoryStore
from textanalyzer.orchestration.llm_client import LLMClient
from textanalyzer.orchestration.text_analyzer import TextAnalyzer
from textanalyzer.utils.logging import SimpleLogger


class AppController:
    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        *,
        llm_client: Optional[LLMClient] = None,
        history: Optional[HistoryStore] = None,
    ) -> None:
        """
        Central app controller.

        - Builds the AnalyzerConfig from the environment unless one is given.
        - Applies its log level to SimpleLogger.
        - Creates one LLMClient + TextAnalyzer for the session.
        - Opens the capped HistoryStore at config.history_path.
        """
        self.config = config or AnalyzerConfig.from_env()
        SimpleLogger.set_level(self.config.log_level)
        self.llm_client = llm_client or LLMClient(self.config)
        self.analyzer = TextAnalyzer(llm_client=self.llm_client)
        self.history_store = history or HistoryStore(self.config.history_path)

    def analyze(
        self,
        question: str,
        answer_text: str,
        judging_criteria: str = "",
        is_critical_mode: bool = True,
    ) -> AnalysisResult:
        """
        Validate the form input, run the analysis and record it in history.

        Raises AnalysisRequestError for blank input and AnalysisUnavailable
        when the model call fails; nothing is recorded in either case.
        """
        request = AnalysisRequest(
            question=(question or "").strip(),
            answer_text=(answer_text or "").strip(),
            judging_criteria=(judging_criteria or "").strip(),
            mode=AnalysisMode.from_flag(is_critical_mode),
        ).validated()

        result = self.analyzer.analyze(request)
        self.history_store.add(request, result)
        return result

    def extract_text(self, image_bytes: bytes) -> str:
        return extract_text_from_image(image_bytes)

    def history(self) -> List[HistoryEntry]:
        return self.history_store.entries()

    def load_entry(self, entry_id: str) -> Optional[HistoryEntry]:
        return self.history_store.get(entry_id)

    def clear_history(self) -> None:
        self.history_store.clear()
