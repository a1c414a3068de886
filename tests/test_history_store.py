import json

import pytest

from textanalyzer.analysis.types import (
    AnalysisMode,
    AnalysisRequest,
    AnalysisResult,
    AuthorLikelihood,
    CompetenceLevel,
    WritingApproach,
    WritingStyle,
)
from textanalyzer.memory.history_store import HistoryEntry, HistoryStore, HistoryStoreError


def _request(i=0, mode=AnalysisMode.CRITICAL):
    return AnalysisRequest(question=f"Question {i}", answer_text=f"Answer {i}", judging_criteria="", mode=mode)


def _result(p=40):
    return AnalysisResult(
        ai_probability=p,
        writing_style=WritingStyle.REFLECTIVE,
        writing_approach=WritingApproach.CHRONOLOGICAL,
        competence_level=CompetenceLevel.ADVANCED,
        author_likelihood=AuthorLikelihood.HUMAN,
        comments="Personal and specific.",
    )


def test_missing_file_is_empty_history(tmp_path):
    store = HistoryStore(tmp_path / "history.json")
    assert len(store) == 0
    assert store.entries() == []


def test_add_puts_newest_first_and_persists(tmp_path):
    path = tmp_path / "data" / "history.json"
    store = HistoryStore(path)

    first = store.add(_request(1), _result(10), timestamp_ms=1000)
    second = store.add(_request(2, AnalysisMode.GENEROUS), _result(20), timestamp_ms=2000)

    assert [e.id for e in store.entries()] == [second.id, first.id]

    reopened = HistoryStore(path)
    assert reopened.entries() == store.entries()
    assert reopened.get(first.id).request.mode is AnalysisMode.CRITICAL
    assert reopened.get(second.id).request.mode is AnalysisMode.GENEROUS

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["key"] == "textAnalysisHistory"
    assert payload["entries"][0]["isCriticalMode"] is False
    assert payload["entries"][0]["results"]["aiProbability"] == 20
    assert not path.with_suffix(".json.tmp").exists()


def test_history_is_capped_at_fifty_newest(tmp_path):
    store = HistoryStore(tmp_path / "history.json")
    for i in range(57):
        store.add(_request(i), _result(i), timestamp_ms=1000 + i)

    entries = store.entries()
    assert len(entries) == 50
    assert [e.request.question for e in entries] == [f"Question {i}" for i in range(56, 6, -1)]
    assert len(HistoryStore(tmp_path / "history.json")) == 50


def test_ids_are_unique_within_one_millisecond(tmp_path):
    store = HistoryStore(tmp_path / "history.json")
    a = store.add(_request(1), _result(), timestamp_ms=5)
    b = store.add(_request(2), _result(), timestamp_ms=5)
    assert a.id != b.id


def test_clear_empties_store_and_file(tmp_path):
    path = tmp_path / "history.json"
    store = HistoryStore(path)
    store.add(_request(), _result())

    store.clear()

    assert len(store) == 0
    assert len(HistoryStore(path)) == 0


def test_get_unknown_id_returns_none(tmp_path):
    assert HistoryStore(tmp_path / "history.json").get("nope") is None


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(HistoryStoreError):
        HistoryStore(path)


def test_malformed_entries_are_skipped(tmp_path):
    path = tmp_path / "history.json"
    good = HistoryEntry(id="1", timestamp=1, request=_request(), result=_result()).to_dict()
    bad = dict(good, id="2", results=dict(good["results"], writingStyle="Bogus"))
    path.write_text(json.dumps({"version": "1", "entries": [good, bad, {"id": "3"}]}), encoding="utf-8")

    store = HistoryStore(path)

    assert [e.id for e in store.entries()] == ["1"]


def test_invalid_max_entries():
    with pytest.raises(ValueError):
        HistoryStore("unused.json", max_entries=0)


def test_non_utf8_file_raises_history_error(tmp_path):
    path = tmp_path / "history.json"
    path.write_bytes(b'{"entries": [\xff\xfe]}')

    with pytest.raises(HistoryStoreError):
        HistoryStore(path)


def test_failed_write_leaves_memory_and_disk_unchanged(tmp_path, monkeypatch):
    path = tmp_path / "history.json"
    store = HistoryStore(path)
    first = store.add(_request(0), _result(10), timestamp_ms=1)
    on_disk = path.read_text(encoding="utf-8")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("textanalyzer.memory.history_store.os.replace", failing_replace)

    with pytest.raises(OSError):
        store.add(_request(1), _result(20), timestamp_ms=2)
    with pytest.raises(OSError):
        store.clear()

    assert store.entries() == [first]
    assert path.read_text(encoding="utf-8") == on_disk
    assert list(tmp_path.glob("*.tmp")) == []
