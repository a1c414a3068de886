from textanalyzer.orchestration.analysis_helpers.json_parser import (
    ExtractionStatus,
    extract_json_object,
    locate_json_object,
    strip_code_fences,
)


def test_strip_code_fences_removes_markers():
    text = '```json\n{"a": 1}\n```'
    assert strip_code_fences(text) == '{"a": 1}\n'


def test_locate_is_greedy_from_first_to_last_brace():
    text = 'Here you go: {"a": {"b": 2}} and a note {x}'
    assert locate_json_object(text) == '{"a": {"b": 2}} and a note {x}'


def test_locate_returns_none_without_braces():
    assert locate_json_object("no json here") is None
    assert locate_json_object("} backwards {") is None


def test_extract_plain_and_noisy_json():
    plain = extract_json_object('{"aiProbability": 12}')
    noisy = extract_json_object('Sure! Here is the analysis:\n{"aiProbability": 12}\nHope this helps.')

    assert plain.ok and plain.data == {"aiProbability": 12}
    assert noisy.ok and noisy.data == {"aiProbability": 12}


def test_extract_reports_no_json_found():
    outcome = extract_json_object("I cannot analyse this text.")
    assert outcome.status is ExtractionStatus.NO_JSON_FOUND
    assert outcome.data is None


def test_extract_reports_malformed_json():
    outcome = extract_json_object('{"aiProbability": 12, "writingStyle": }')
    assert outcome.status is ExtractionStatus.MALFORMED_JSON
    assert outcome.snippet == '{"aiProbability": 12, "writingStyle": }'
    assert outcome.error


def test_extract_non_string_is_no_json():
    assert extract_json_object(None).status is ExtractionStatus.NO_JSON_FOUND
