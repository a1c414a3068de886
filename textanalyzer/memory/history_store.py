# -*- coding: utf-8 -*-
"""
history_store.py

Purpose:
    A small, capped ledger of past analyses. Every completed analysis is
    stored as one HistoryEntry (request + result); the list is kept
    newest-first and never grows beyond `max_entries` (default 50).

On-disk JSON:
    {
      "version": "1",
      "key": "textAnalysisHistory",
      "entries": [
        {
          "id": "1718000000000",
          "timestamp": 1718000000000,       # ms since epoch
          "question": "...",
          "answerText": "...",
          "judgingCriteria": "",
          "isCriticalMode": true,
          "results": {"aiProbability": 42, "writingStyle": "Analytical", ...}
        },
        ...
      ]
    }

Notes:
    - Writes are atomic: *.tmp then os.replace.
    - A missing file is an empty history; a file that is not JSON raises
      HistoryStoreError; single malformed entries are skipped with a warning.
"""

from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from textanalyzer.analysis.types import AnalysisMode, AnalysisRequest, AnalysisResult
from textanalyzer.utils.logging import SimpleLogger

STORAGE_KEY = "textAnalysisHistory"
MAX_ENTRIES = 50
FORMAT_VERSION = "1"


class HistoryStoreError(ValueError):
    """Raised when the history file exists but cannot be decoded."""


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    timestamp: int
    request: AnalysisRequest
    result: AnalysisResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "question": self.request.question,
            "answerText": self.request.answer_text,
            "judgingCriteria": self.request.judging_criteria or "",
            "isCriticalMode": self.request.mode.is_critical,
            "results": self.result.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        request = AnalysisRequest(
            question=str(data["question"]),
            answer_text=str(data["answerText"]),
            judging_criteria=str(data.get("judgingCriteria") or ""),
            mode=AnalysisMode.from_flag(bool(data.get("isCriticalMode", True))),
        )
        return cls(
            id=str(data["id"]),
            timestamp=int(data["timestamp"]),
            request=request,
            result=AnalysisResult.from_dict(data["results"]),
        )


class HistoryStore:
    """
    File-backed, capped, newest-first list of HistoryEntry objects.

    The file is read once at construction; every mutation rewrites it.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        max_entries: int = MAX_ENTRIES,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.path = Path(path)
        self.max_entries = max_entries
        self.storage_key = storage_key
        self._entries: List[HistoryEntry] = self._load()

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def entries(self) -> List[HistoryEntry]:
        """Newest first (copy; mutating it does not touch the store)."""
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def add(
        self,
        request: AnalysisRequest,
        result: AnalysisResult,
        *,
        timestamp_ms: Optional[int] = None,
    ) -> HistoryEntry:
        ts = int(time.time() * 1000) if timestamp_ms is None else int(timestamp_ms)
        entry = HistoryEntry(id=self._new_id(ts), timestamp=ts, request=request, result=result)

        entries = [entry] + self._entries[: self.max_entries - 1]
        self._publish(entries)
        self._entries = entries
        return entry

    def clear(self) -> None:
        self._publish([])
        self._entries = []
        SimpleLogger.info(f"HistoryStore: cleared {self.path}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _new_id(self, ts: int) -> str:
        # ids stay unique when several entries share a millisecond
        taken = {entry.id for entry in self._entries}
        candidate = str(ts)
        suffix = 1
        while candidate in taken:
            candidate = f"{ts}-{suffix}"
            suffix += 1
        return candidate

    def _load(self) -> List[HistoryEntry]:
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise HistoryStoreError(f"History file is not valid UTF-8 JSON: {self.path}") from e

        raw_entries = data.get("entries", []) if isinstance(data, dict) else []
        if not isinstance(raw_entries, list):
            raw_entries = []

        entries: List[HistoryEntry] = []
        for raw in raw_entries:
            try:
                entries.append(HistoryEntry.from_dict(raw))
            except (KeyError, TypeError, ValueError) as exc:
                SimpleLogger.warning(f"HistoryStore: skipping malformed entry: {exc!r}")

        return entries[: self.max_entries]

    def _publish(self, entries: List[HistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "version": FORMAT_VERSION,
            "key": self.storage_key,
            "entries": [entry.to_dict() for entry in entries],
        }

        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(str(tmp_path), str(self.path))
        finally:
            # only left behind when the write or the rename failed
            if tmp_path.exists():
                tmp_path.unlink()
