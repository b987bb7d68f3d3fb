# colorwalk/journey.py
# Rolling daily mood log: one entry per date label, most recent 14 kept.
import logging
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from colorwalk.presets import EmotionPreset, color_for

logger = logging.getLogger(__name__)

MAX_ENTRIES = 14

STARTER_HISTORY = (
    {"date": "10/01", "emotion": "calm", "value": 0.4},
    {"date": "10/02", "emotion": "joy", "value": 0.8},
    {"date": "10/03", "emotion": "neutral", "value": 0.0},
    {"date": "10/04", "emotion": "anxious", "value": -0.2},
    {"date": "10/05", "emotion": "joy", "value": 0.8},
    {"date": "10/06", "emotion": "sad", "value": -0.6},
    {"date": "10/07", "emotion": "calm", "value": 0.4},
)


def starter_history() -> List[dict]:
    return [dict(e) for e in STARTER_HISTORY]


def date_label(today: date) -> str:
    """Formats like 10/07 or 3/05 (month unpadded, day padded)."""
    return f"{today.month}/{today.day:02d}"


def record_today(log: List[dict], emotion: EmotionPreset, today: date) -> List[dict]:
    """
    Record `emotion` for `today`. An existing entry for the same label is
    replaced at its position; otherwise a new entry goes at the end.
    The input list is left untouched.
    """
    label = date_label(today)
    entry = {"date": label, "emotion": emotion.key, "value": emotion.valence}
    nxt = [dict(e) for e in log]
    for i, existing in enumerate(nxt):
        if existing["date"] == label:
            nxt[i] = entry
            logger.debug("updated %s -> %s", label, emotion.key)
            break
    else:
        nxt.append(entry)
        logger.debug("appended %s -> %s", label, emotion.key)
    return nxt[-MAX_ENTRIES:]


def chart_rows(log: List[dict]) -> List[dict]:
    return [{"name": d["date"], "valence": d["value"], "color": color_for(d["emotion"])} for d in log]


def to_frame(log: List[dict]) -> pd.DataFrame:
    """Chart data indexed by date label, in log order."""
    df = pd.DataFrame(chart_rows(log), columns=["name", "valence", "color"])
    return df.set_index("name")


def trend_summary(log: List[dict]) -> Dict[str, Optional[object]]:
    if not log:
        return {"count": 0, "mean_valence": None, "latest": None}
    values = [float(d["value"]) for d in log]
    return {
        "count": len(log),
        "mean_valence": round(sum(values) / len(values), 2),
        "latest": dict(log[-1]),
    }
