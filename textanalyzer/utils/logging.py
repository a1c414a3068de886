# -*- coding: utf-8 -*-
"""
SimpleLogger — tiny logging facade for the text analyzer.

Goal:
- One call style everywhere: SimpleLogger.info/debug/warning/error.
- Timestamped lines on stdout, so Streamlit's console shows what happened
  (prompt sent, raw model reply, fallbacks taken).
- A level threshold: the full prompt dump is DEBUG, the raw reply on a
  fallback is ERROR, so TEXTANALYZER_LOG_LEVEL=WARN keeps the console quiet
  without hiding coercion failures.
- Can be muted entirely (tests).
"""

from __future__ import annotations
import sys
import datetime
from typing import ClassVar, Dict


class SimpleLogger:
    """
    Very small logging helper.

    Usage:
        SimpleLogger.set_level("WARN")
        SimpleLogger.debug("prompt dump")    # dropped
        SimpleLogger.error("raw reply ...")  # printed
    """

    LEVELS: ClassVar[Dict[str, int]] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}

    _enabled: ClassVar[bool] = True
    _threshold: ClassVar[int] = 10
    _prefix: ClassVar[str] = "TextAnalyzer"

    @classmethod
    def level_name(cls, level: str) -> str:
        """Canonical level name; WARNING is accepted for WARN. Raises ValueError otherwise."""
        name = str(level).strip().upper()
        if name == "WARNING":
            name = "WARN"
        if name not in cls.LEVELS:
            raise ValueError(f"unknown log level {level!r}; expected one of {sorted(cls.LEVELS)}")
        return name

    @classmethod
    def _log(cls, level: str, msg: str) -> None:
        if not cls._enabled or cls.LEVELS[level] < cls._threshold:
            return
        now = datetime.datetime.now().strftime("%H:%M:%S")
        print(f"{cls._prefix} | {level:5s} | {now} | {msg}", file=sys.stdout, flush=True)

    @classmethod
    def debug(cls, msg: str) -> None:
        cls._log("DEBUG", msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls._log("INFO", msg)

    @classmethod
    def warning(cls, msg: str) -> None:
        cls._log("WARN", msg)

    @classmethod
    def error(cls, msg: str) -> None:
        cls._log("ERROR", msg)

    @classmethod
    def set_enabled(cls, enabled: bool) -> None:
        cls._enabled = enabled

    @classmethod
    def set_level(cls, level: str) -> None:
        cls._threshold = cls.LEVELS[cls.level_name(level)]

    @classmethod
    def get_level(cls) -> str:
        return next(name for name, value in cls.LEVELS.items() if value == cls._threshold)
