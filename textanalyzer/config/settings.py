"""
Settings
========
Centralised, cached access to environment configuration, plus the
`AnalyzerConfig` record that is injected into the transport and the
history store at construction time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict

from dotenv import load_dotenv

from textanalyzer.utils.logging import SimpleLogger
from textanalyzer.utils.paths import PATHS

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama3-70b-8192"


class Settings:
    _CACHE: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any | None = None) -> Any:
        if key not in cls._CACHE:
            cls._CACHE[key] = os.getenv(key, default)
        return cls._CACHE[key]

    @classmethod
    def clear(cls) -> None:
        cls._CACHE.clear()


def _typed(key: str, default: Any, cast: Callable[[str], Any]) -> Any:
    raw = Settings.get(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return cast(str(raw).strip())
    except ValueError:
        SimpleLogger.warning(f"Settings: {key}={raw!r} is not a valid {cast.__name__}; using {default!r}")
        return default


@dataclass(frozen=True)
class AnalyzerConfig:
    """Connection and model settings for the chat-completion endpoint."""
    api_key: str = ""
    base_url: str = GROQ_BASE_URL
    model_name: str = DEFAULT_MODEL
    temperature: float = 0.1
    max_tokens: int = 1500
    top_p: float = 0.9
    timeout_s: float = 60.0
    history_path: Path = PATHS["history"]
    log_level: str = "DEBUG"

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True) -> "AnalyzerConfig":
        """
        Build the config from GROQ_* / TEXTANALYZER_* environment variables.

        A local .env file is loaded first (existing variables win).
        """
        if use_dotenv:
            load_dotenv()
        return cls(
            api_key=str(Settings.get("GROQ_API_KEY", "") or "").strip(),
            base_url=str(Settings.get("GROQ_BASE_URL", "") or "").strip() or GROQ_BASE_URL,
            model_name=str(Settings.get("GROQ_MODEL", "") or "").strip() or DEFAULT_MODEL,
            temperature=_typed("GROQ_TEMPERATURE", 0.1, float),
            max_tokens=_typed("GROQ_MAX_TOKENS", 1500, int),
            top_p=_typed("GROQ_TOP_P", 0.9, float),
            timeout_s=_typed("GROQ_TIMEOUT_S", 60.0, float),
            history_path=_typed("TEXTANALYZER_HISTORY_PATH", PATHS["history"], Path),
            log_level=_typed("TEXTANALYZER_LOG_LEVEL", "DEBUG", SimpleLogger.level_name),
        )
