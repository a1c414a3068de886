# -*- coding: utf-8 -*-
"""
json_parser
===========

Why this helper exists:
- Models often return messy strings: JSON wrapped in ```json fences, or JSON
  plus explanations before and after it.
- ResponseCoercer must tell apart "no JSON at all" from "JSON that does not
  decode", so this module reports WHICH step failed instead of returning {}.

What it does:
- `strip_code_fences(text)` removes markdown fence markers.
- `locate_json_object(text)` returns the greedy slice from the first '{' to
  the last '}', or None.
- `extract_json_object(raw_output)` runs strip → locate → decode and returns a
  JsonExtraction with a status and (on success) the decoded dict.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

_FENCE_JSON_RE = re.compile(r"```json\n?")
_FENCE_RE = re.compile(r"```\n?")


class ExtractionStatus(str, Enum):
    OK = "ok"
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"


@dataclass(frozen=True)
class JsonExtraction:
    status: ExtractionStatus
    data: Optional[Dict[str, Any]] = None
    snippet: Optional[str] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.OK


def strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    cleaned = _FENCE_JSON_RE.sub("", cleaned)
    cleaned = _FENCE_RE.sub("", cleaned)
    return cleaned


def locate_json_object(text: str) -> Optional[str]:
    """Greedy match: first '{' up to and including the last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def extract_json_object(raw_output: Any) -> JsonExtraction:
    """
    Best-effort extraction of a JSON object from the raw model reply.

    Never raises; the status says which stage stopped the extraction.
    """
    if not isinstance(raw_output, str):
        return JsonExtraction(
            status=ExtractionStatus.NO_JSON_FOUND,
            error=f"reply is {type(raw_output).__name__}, not str",
        )

    snippet = locate_json_object(strip_code_fences(raw_output))
    if snippet is None:
        return JsonExtraction(status=ExtractionStatus.NO_JSON_FOUND, error="No JSON found in response")

    try:
        data = json.loads(snippet)
    except json.JSONDecodeError as exc:
        return JsonExtraction(status=ExtractionStatus.MALFORMED_JSON, snippet=snippet, error=str(exc))

    if not isinstance(data, dict):
        return JsonExtraction(
            status=ExtractionStatus.MALFORMED_JSON,
            snippet=snippet,
            error=f"decoded {type(data).__name__}, expected object",
        )

    return JsonExtraction(status=ExtractionStatus.OK, data=data, snippet=snippet)
