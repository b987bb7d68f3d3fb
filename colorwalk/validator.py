# colorwalk/validator.py
# Journey log checks: shape, window size, one entry per date, known emotions, valence copies.
from typing import List, Tuple

from jsonschema import Draft202012Validator

from colorwalk.journey import MAX_ENTRIES
from colorwalk.presets import EMOTION_PRESETS
from colorwalk.schemas import JOURNEY_ENTRY_SCHEMA

_entry_validator = Draft202012Validator(JOURNEY_ENTRY_SCHEMA)


def validate_history(log: List[dict]) -> Tuple[bool, str]:
    if len(log) > MAX_ENTRIES:
        return False, "TOO_LONG"

    seen = set()
    for entry in log:
        # Key check first so a bad key reports as such, not as a schema enum miss
        key = entry.get("emotion") if isinstance(entry, dict) else None
        if isinstance(key, str) and key not in EMOTION_PRESETS:
            return False, f"UNKNOWN_EMOTION:{key}"

        error = next(iter(_entry_validator.iter_errors(entry)), None)
        if error is not None:
            return False, f"SCHEMA:{error.message}"

        label = entry["date"]
        if label in seen:
            return False, f"DUPLICATE_DATE:{label}"
        seen.add(label)

        if abs(float(entry["value"]) - EMOTION_PRESETS[key].valence) > 1e-9:
            return False, f"VALENCE_MISMATCH:{label}"

    return True, "OK"
