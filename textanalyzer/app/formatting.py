# -*- coding: utf-8 -*-
"""Display helpers shared by the result card and the history list."""
from __future__ import annotations

from typing import Tuple


def probability_band(probability: int) -> str:
    if probability >= 70:
        return "high"
    if probability >= 40:
        return "medium"
    return "low"


def probability_color(probability: int) -> str:
    if probability >= 80:
        return "red"
    if probability >= 60:
        return "orange"
    if probability >= 40:
        return "amber"
    return "green"


def truncate_text(text: str, max_length: int) -> str:
    return text[:max_length] + "..." if len(text) > max_length else text


def text_stats(text: str) -> Tuple[int, int]:
    """(characters, words)"""
    return len(text), len(text.split())


def mode_label(is_critical_mode: bool) -> str:
    return "Critical" if is_critical_mode else "Generous"


def empty_results_hint(is_critical_mode: bool) -> str:
    return (
        f'Enter your text content and click "Perform {mode_label(is_critical_mode)} Analysis" '
        "to receive detailed insights"
    )
