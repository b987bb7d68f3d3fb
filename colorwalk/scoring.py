# colorwalk/scoring.py
# Points + 7-slot rainbow advanced by completed micro-actions.
from typing import List, Tuple

from colorwalk.presets import EmotionPreset

POINTS_PER_TASK = 10
RAINBOW_SLOTS = 7
RAINBOW_COLORS = ("#FFD54F", "#FF8A65", "#81C784", "#4FC3F7", "#9575CD", "#F48FB1", "#90A4AE")


def empty_rainbow() -> Tuple[bool, ...]:
    return (False,) * RAINBOW_SLOTS


def complete_task(points: int, rainbow: Tuple[bool, ...]) -> Tuple[int, Tuple[bool, ...]]:
    """
    Award points and light the first dark slot. A fully lit rainbow stays
    as-is but points keep accruing. Callers guard against repeats.
    """
    nxt = list(rainbow)
    for i, lit in enumerate(nxt):
        if not lit:
            nxt[i] = True
            break
    return points + POINTS_PER_TASK, tuple(nxt)


def lit_count(rainbow: Tuple[bool, ...]) -> int:
    return sum(1 for on in rainbow if on)


def suggestions(preset: EmotionPreset) -> List[dict]:
    """Current preset's tasks with stable ids like 'calm-0'."""
    return [{"id": f"{preset.key}-{i}", "text": t} for i, t in enumerate(preset.tasks)]
