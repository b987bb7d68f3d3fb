from datetime import date

import jsonschema
import pytest

from colorwalk.journey import record_today, starter_history
from colorwalk.presets import EMOTION_PRESETS
from colorwalk.schemas import JOURNEY_LOG_SCHEMA, ensure_valid
from colorwalk.validator import validate_history


def test_seed_and_updated_logs_are_valid():
    assert validate_history(starter_history()) == (True, "OK")
    log = starter_history()
    for day in range(8, 30):
        log = record_today(log, EMOTION_PRESETS["sad"], date(2025, 10, day))
    assert validate_history(log) == (True, "OK")
    assert validate_history([]) == (True, "OK")


def test_too_long():
    log = [{"date": f"1/{d:02d}", "emotion": "joy", "value": 0.8} for d in range(1, 16)]
    assert validate_history(log) == (False, "TOO_LONG")


def test_duplicate_date():
    log = starter_history() + [{"date": "10/07", "emotion": "joy", "value": 0.8}]
    assert validate_history(log) == (False, "DUPLICATE_DATE:10/07")


def test_unknown_emotion():
    log = [{"date": "10/01", "emotion": "angry", "value": -0.5}]
    assert validate_history(log) == (False, "UNKNOWN_EMOTION:angry")


def test_valence_mismatch():
    log = [{"date": "10/01", "emotion": "joy", "value": 0.1}]
    assert validate_history(log) == (False, "VALENCE_MISMATCH:10/01")


@pytest.mark.parametrize(
    "entry",
    [
        {"date": "10/01", "emotion": "joy"},
        {"date": "2025-10-01", "emotion": "joy", "value": 0.8},
        {"date": "10/01", "emotion": "joy", "value": 1.5},
        {"date": "10/01", "emotion": "joy", "value": 0.8, "extra": 1},
    ],
)
def test_schema_problems(entry):
    ok, reason = validate_history([entry])
    assert ok is False
    assert reason.startswith("SCHEMA:")


def test_ensure_valid_raises_on_bad_log():
    ensure_valid(JOURNEY_LOG_SCHEMA, starter_history())
    with pytest.raises(jsonschema.ValidationError):
        ensure_valid(JOURNEY_LOG_SCHEMA, [{"date": "10/01"}])


def test_ensure_valid_names_the_payload():
    with pytest.raises(jsonschema.ValidationError, match="^journey log: "):
        ensure_valid(JOURNEY_LOG_SCHEMA, [{"date": "10/01"}], name="journey log")
    with pytest.raises(jsonschema.ValidationError, match="^payload: "):
        ensure_valid(JOURNEY_LOG_SCHEMA, "nope")
