# colorwalk/state.py
import os
from typing import FrozenSet, NamedTuple, Tuple

from colorwalk.journey import starter_history
from colorwalk.presets import NEUTRAL_KEY, EmotionPreset, get_preset
from colorwalk.schemas import SESSION_SNAPSHOT_SCHEMA, ensure_valid
from colorwalk.scoring import empty_rainbow


class SessionState(NamedTuple):
    """One UI session. Never mutated; events build a new value with _replace."""
    text: str
    current: str
    history: Tuple[dict, ...]
    points: int
    rainbow: Tuple[bool, ...]
    completed: FrozenSet[str]
    auto_breath: bool

    @property
    def preset(self) -> EmotionPreset:
        return get_preset(self.current)


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def initial_state(auto_breath=None) -> SessionState:
    if auto_breath is None:
        auto_breath = _env_flag("COLOR_WALK_AUTO_BREATH")
    return SessionState(
        text="",
        current=NEUTRAL_KEY,
        history=tuple(starter_history()),
        points=0,
        rainbow=empty_rainbow(),
        completed=frozenset(),
        auto_breath=bool(auto_breath),
    )


def snapshot(state: SessionState) -> dict:
    """JSON-serializable view of the session, schema-checked."""
    p = state.preset
    out = {
        "text": state.text,
        "current": {
            "key": p.key,
            "name": p.name,
            "color": p.color,
            "valence": p.valence,
            "visuals": p.visuals,
        },
        "history": [dict(e) for e in state.history],
        "points": state.points,
        "rainbow": list(state.rainbow),
        "completed": sorted(state.completed),
        "auto_breath": state.auto_breath,
    }
    return ensure_valid(SESSION_SNAPSHOT_SCHEMA, out, name="session snapshot")
