# -*- coding: utf-8 -*-
"""
field_normalizer
================

Why this helper exists:
- Every field of the model reply must be cleaned before it reaches an
  AnalysisResult: scores clamped, labels checked against their closed enum,
  comments non-empty.
- This logic is generic and should not sit inside ResponseCoercer.

What it does:
- `normalize_probability()` for the 0..100 integer score.
- `normalize_enum()` for single-choice label fields.
- `normalize_comments()` for the free-text explanation.
All three always return a safe value; none of them raise on bad input.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional, TypeVar

from textanalyzer.utils.logging import SimpleLogger

E = TypeVar("E", bound=Enum)

PROBABILITY_MIN = 0
PROBABILITY_MAX = 100


def _as_number(raw_value: Any) -> Optional[float]:
    # bool is an int subclass; true/false are not scores
    if isinstance(raw_value, bool):
        return None
    if isinstance(raw_value, int):
        # arbitrary-size ints are clamped before float() can overflow
        return float(max(PROBABILITY_MIN, min(PROBABILITY_MAX, raw_value)))
    if isinstance(raw_value, float):
        number = raw_value
    elif isinstance(raw_value, str):
        text = raw_value.strip().rstrip("%").strip()
        if not text:
            return None
        try:
            return _as_number(int(text))
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp_probability(value: float) -> int:
    return int(max(PROBABILITY_MIN, min(PROBABILITY_MAX, round(value))))


def normalize_probability(field_id: str, raw_value: Any, default_value: int) -> int:
    """
    Normalize the AI-probability score.

    Rules:
    - int/float or numeric string (optional trailing '%') → rounded, clamped to [0, 100].
    - anything else (missing, bool, NaN, text) → default_value (also clamped).
    """
    number = _as_number(raw_value)
    if number is None:
        if raw_value is not None:
            SimpleLogger.warning(
                f"field_normalizer.normalize_probability: non-numeric '{field_id}'={raw_value!r}; "
                f"using default {default_value}"
            )
        return clamp_probability(default_value)
    return clamp_probability(number)


def normalize_enum(field_id: str, raw_value: Any, enum_cls: type[E], default_value: E) -> E:
    """
    Normalize a single-choice label field to a member of enum_cls.

    Only an exact value match is accepted; everything else becomes default_value.
    """
    if isinstance(raw_value, str):
        for member in enum_cls:
            if member.value == raw_value:
                return member

    if raw_value is not None:
        SimpleLogger.warning(
            f"field_normalizer.normalize_enum: '{field_id}'={raw_value!r} not in "
            f"{enum_cls.__name__}; using default {default_value.value!r}"
        )
    return default_value


def normalize_comments(raw_value: Any, placeholder: str) -> str:
    if isinstance(raw_value, str) and raw_value.strip():
        return raw_value.strip()
    return placeholder
