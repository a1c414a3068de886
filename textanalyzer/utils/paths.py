"""
Paths
=====
Centralises the on-disk locations of the app so that a single import
(`from textanalyzer.utils.paths import PATHS`) gives typed access to them.
"""
from pathlib import Path
from typing import TypedDict

class _Paths(TypedDict):
    root:    Path
    data:    Path
    history: Path

ROOT = Path(__file__).resolve().parents[2]

PATHS: _Paths = {
    "root":    ROOT,
    "data":    ROOT / "data",
    "history": ROOT / "data" / "history.json",
}
