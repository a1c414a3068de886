# textanalyzer/orchestration/llm_client.py
# -*- coding: utf-8 -*-
"""
LLMClient — thin wrapper around the chat-completion endpoint.

Current implementation:
- Uses the OpenAI Python client v1 (OpenAI() + client.chat.completions.create)
  pointed at Groq's OpenAI-compatible base URL.
- API key, base URL and timeout come from an injected AnalyzerConfig; nothing
  is read from source constants.
- Every transport problem (missing key, network error, auth failure, non-2xx,
  reply without choices) surfaces as AnalysisUnavailable.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from textanalyzer.config.settings import AnalyzerConfig
from textanalyzer.utils.logging import SimpleLogger


class AnalysisUnavailable(Exception):
    """Raised when the upstream model call fails; no partial result exists."""


class LLMClient:
    """
    Neutral LLM gateway.

    You give it:
      - messages: [{"role": "system", "content": "..."}, {"role": "user", "content": "..."}]
      - model_name, temperature, max_output_tokens, top_p

    It returns:
      - the raw reply text (choices[0].message.content)
    """

    def __init__(self, config: AnalyzerConfig, client: Any = None) -> None:
        self.config = config
        self._client: Optional[Any] = client

        if self._client is not None:
            return

        if not config.api_key:
            SimpleLogger.warning(
                "LLMClient: GROQ_API_KEY not set. Any analysis will fail until you set it."
            )
            return

        self._client = OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_s,
        )
        SimpleLogger.info(f"LLMClient: client initialised for {config.base_url}")

    @property
    def ready(self) -> bool:
        return self._client is not None

    def chat(
            self,
            *,
            messages: List[Dict[str, str]],
            model_name: Optional[str] = None,
            temperature: Optional[float] = None,
            max_output_tokens: Optional[int] = None,
            top_p: Optional[float] = None,
    ) -> str:
        """
        Send one chat-completion request and return the reply text.

        Unset parameters fall back to the injected AnalyzerConfig.
        """
        if self._client is None:
            raise AnalysisUnavailable("LLMClient: API client is not initialised (missing API key?)")

        kwargs: Dict[str, Any] = {
            "model": model_name or self.config.model_name,
            "messages": messages,
            "temperature": self.config.temperature if temperature is None else temperature,
            "max_tokens": max_output_tokens or self.config.max_tokens,
            "top_p": self.config.top_p if top_p is None else top_p,
        }

        try:
            resp = self._client.chat.completions.create(**kwargs)
        except openai.OpenAIError as exc:
            SimpleLogger.error(f"LLMClient: chat completion failed: {exc!r}")
            raise AnalysisUnavailable("Failed to analyze text with the language model API") from exc

        choices = getattr(resp, "choices", None) or []
        if not choices:
            SimpleLogger.error("LLMClient: response contained no choices")
            raise AnalysisUnavailable("Language model API returned no choices")

        content = choices[0].message.content
        return content if isinstance(content, str) else str(content or "")
