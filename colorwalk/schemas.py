# Minimal JSON Schemas & validators for the journey log and session snapshots.
# We validate what the page/CLI emit to keep contracts honest.
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from colorwalk.journey import MAX_ENTRIES
from colorwalk.presets import EMOTION_PRESETS
from colorwalk.scoring import RAINBOW_SLOTS

EMOTION_KEYS = sorted(EMOTION_PRESETS)

JOURNEY_ENTRY_SCHEMA = {
    "type": "object",
    "required": ["date", "emotion", "value"],
    "additionalProperties": False,
    "properties": {
        "date": {"type": "string", "pattern": r"^\d{1,2}/\d{2}$"},
        "emotion": {"type": "string", "enum": EMOTION_KEYS},
        "value": {"type": "number", "minimum": -1, "maximum": 1},
    },
}

JOURNEY_LOG_SCHEMA = {
    "type": "array",
    "maxItems": MAX_ENTRIES,
    "items": JOURNEY_ENTRY_SCHEMA,
}

SESSION_SNAPSHOT_SCHEMA = {
    "type": "object",
    "required": ["text", "current", "history", "points", "rainbow", "completed", "auto_breath"],
    "properties": {
        "text": {"type": "string"},
        "current": {
            "type": "object",
            "required": ["key", "name", "color", "valence", "visuals"],
            "properties": {
                "key": {"type": "string", "enum": EMOTION_KEYS},
                "name": {"type": "string"},
                "color": {"type": "string", "pattern": "^#[0-9A-Fa-f]{3,6}$"},
                "valence": {"type": "number", "minimum": -1, "maximum": 1},
                "visuals": {"type": "string"},
            },
        },
        "history": JOURNEY_LOG_SCHEMA,
        "points": {"type": "integer", "minimum": 0},
        "rainbow": {
            "type": "array",
            "items": {"type": "boolean"},
            "minItems": RAINBOW_SLOTS,
            "maxItems": RAINBOW_SLOTS,
        },
        "completed": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
        "auto_breath": {"type": "boolean"},
    },
}


def ensure_valid(schema, obj, name="payload"):
    error = best_match(Draft202012Validator(schema).iter_errors(obj))
    if error is not None:
        error.message = f"{name}: {error.message}"
        raise error
    return obj
