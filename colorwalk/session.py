# colorwalk/session.py
# Event dispatcher: (state, event) -> new state. Events are plain dicts with a "type".
import logging
from datetime import date
from typing import Optional

from colorwalk.classifier import analyze_text
from colorwalk.journey import record_today
from colorwalk.scoring import complete_task, suggestions
from colorwalk.state import SessionState

logger = logging.getLogger(__name__)

KEYWORD_SEPARATOR = "，"


class UnknownEventError(ValueError):
    pass


def append_keyword(text: str, word: str) -> str:
    return (text + KEYWORD_SEPARATOR if text else "") + word


def analyze(state: SessionState, today: Optional[date] = None) -> SessionState:
    emo = analyze_text(state.text)
    history = record_today(list(state.history), emo, today or date.today())
    logger.debug("analyzed %r as %s", state.text, emo.key)
    return state._replace(current=emo.key, history=tuple(history))


def mark_task_done(state: SessionState, task_id: str) -> SessionState:
    # already-done tasks are ignored, so points are never double-counted
    if task_id in state.completed:
        return state
    points, rainbow = complete_task(state.points, state.rainbow)
    return state._replace(completed=state.completed | {task_id}, points=points, rainbow=rainbow)


def current_suggestions(state: SessionState):
    return [dict(s, done=s["id"] in state.completed) for s in suggestions(state.preset)]


def apply_event(state: SessionState, event: dict) -> SessionState:
    typ = event.get("type")
    if typ == "set_text":
        return state._replace(text=event.get("text") or "")
    elif typ == "add_keyword":
        return state._replace(text=append_keyword(state.text, event["word"]))
    elif typ == "clear_text":
        return state._replace(text="")
    elif typ == "analyze":
        return analyze(state, event.get("today"))
    elif typ == "complete_task":
        return mark_task_done(state, event["task_id"])
    elif typ == "toggle_auto_breath":
        enabled = event.get("enabled")
        return state._replace(auto_breath=(not state.auto_breath) if enabled is None else bool(enabled))
    raise UnknownEventError(f"unknown event type: {typ!r}")
