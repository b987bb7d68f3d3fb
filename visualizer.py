import logging
import os
from datetime import datetime

import streamlit as st
from dotenv import load_dotenv

from colorwalk import prompts
from colorwalk.journey import to_frame, trend_summary
from colorwalk.presets import EMOTION_PRESETS, VISUAL_STYLES, keyword_chips
from colorwalk.scoring import RAINBOW_COLORS, RAINBOW_SLOTS, lit_count
from colorwalk.session import apply_event, current_suggestions
from colorwalk.state import initial_state
from colorwalk.validator import validate_history

STATE_KEY = "color_walk"
TEXT_KEY = "mood_text"

# --- Helper Functions ---

def _state():
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state()
    return st.session_state[STATE_KEY]


def dispatch(event):
    """Apply one UI event and keep the text box in sync with the session."""
    st.session_state[STATE_KEY] = apply_event(_state(), event)
    st.session_state[TEXT_KEY] = st.session_state[STATE_KEY].text


def _on_text_change():
    st.session_state[STATE_KEY] = apply_event(_state(), {"type": "set_text", "text": st.session_state[TEXT_KEY]})


def visual_html(style: str, color: str, auto_breath: bool) -> str:
    """CSS-only animation per visual style tag."""
    box = "position:relative;height:12rem;overflow:hidden;border-radius:1rem;border:1px solid #eee;background:#fff9;"
    center = box + "display:flex;align-items:center;justify-content:center;"
    if style == "bubbles":
        dots = "".join(
            f'<span style="position:absolute;bottom:-20px;left:{(i * 37) % 95}%;width:{10 + (i % 5) * 6}px;'
            f'height:{10 + (i % 5) * 6}px;border-radius:50%;background:{color};opacity:.8;'
            f'animation:cw-rise {2 + (i % 4) * 0.35:.2f}s ease-out {(i % 7) * 0.07:.2f}s infinite;"></span>'
            for i in range(14)
        )
        return f'<style>@keyframes cw-rise{{to{{transform:translateY(-220px)}}}}</style><div style="{box}">{dots}</div>'
    if style == "ripple":
        rings = "".join(
            f'<div style="position:absolute;width:40px;height:40px;border-radius:50%;border:1px solid {color};'
            f'animation:cw-ripple {3 + i * 0.6:.1f}s ease-out {i * 0.5:.1f}s infinite;"></div>'
            for i in range(5)
        )
        return (
            "<style>@keyframes cw-ripple{from{transform:scale(1);opacity:.6}to{transform:scale(6);opacity:0}}</style>"
            f'<div style="{center}">{rings}</div>'
        )
    if style == "raindrop":
        drops = "".join(
            f'<span style="position:absolute;top:-30px;left:{i / 18 * 100:.1f}%;width:2px;height:14px;background:{color};'
            f'animation:cw-fall {2 + (i % 3) * 0.3:.1f}s ease-in {(i % 6) * 0.2:.1f}s infinite;"></span>'
            for i in range(18)
        )
        return (
            "<style>@keyframes cw-fall{0%{transform:translateY(0);opacity:0}50%{opacity:1}"
            "100%{transform:translateY(250px);opacity:0}}</style>"
            f'<div style="{box}">{drops}</div>'
        )
    if style == "breath":
        anim = "animation:cw-breath 5s ease-in-out infinite;" if auto_breath else ""
        return (
            "<style>@keyframes cw-breath{0%,100%{transform:scale(1)}50%{transform:scale(1.12)}}</style>"
            f'<div style="{center}"><div style="width:120px;height:120px;border-radius:50%;'
            f'background:{color};opacity:.35;{anim}"></div></div>'
        )
    # glow
    return (
        "<style>@keyframes cw-glow{0%,100%{transform:scale(.9)}50%{transform:scale(1.1)}}</style>"
        f'<div style="{center}"><div style="width:160px;height:160px;border-radius:50%;filter:blur(24px);'
        f'background:{color};opacity:.35;animation:cw-glow 6s ease-in-out infinite;"></div></div>'
    )


def rainbow_label(rainbow) -> str:
    return f"{lit_count(rainbow)}/{RAINBOW_SLOTS}"


def rainbow_html(rainbow) -> str:
    bars = "".join(
        f'<div style="height:.5rem;flex:1;border-radius:9999px;background:{RAINBOW_COLORS[i]};'
        f'opacity:{1 if on else 0.3};"></div>'
        for i, on in enumerate(rainbow)
    )
    return f'<div style="display:flex;gap:.5rem">{bars}</div>'


def legend_html() -> str:
    items = "".join(
        f'<span style="display:inline-flex;align-items:center;gap:.25rem;margin-right:.75rem">'
        f'<span style="width:.75rem;height:.75rem;border-radius:50%;background:{p.color}"></span>{p.name}</span>'
        for p in EMOTION_PRESETS.values()
    )
    return f'<div style="font-size:.75rem;color:#52525b">{items}</div>'


# --- Main Streamlit App ---

def main():
    load_dotenv()
    logging.basicConfig(level=os.getenv("COLOR_WALK_LOG_LEVEL", "WARNING").upper())
    st.set_page_config(layout="wide", page_title="Color Walk")

    state = _state()
    st.session_state.setdefault(TEXT_KEY, state.text)

    head_left, head_right = st.columns([4, 1])
    with head_left:
        st.title(prompts.APP_TITLE)
        st.caption(prompts.APP_SUBTITLE)
    with head_right:
        st.toggle(
            prompts.AUTO_BREATH_LABEL,
            value=state.auto_breath,
            key="auto_breath_toggle",
            on_change=lambda: dispatch({"type": "toggle_auto_breath", "enabled": st.session_state["auto_breath_toggle"]}),
        )

    left, right = st.columns([1, 2])

    with left:
        st.subheader(f"🧠 {prompts.INPUT_HEADER}")
        st.text_area(" ", key=TEXT_KEY, placeholder=prompts.INPUT_PLACEHOLDER, on_change=_on_text_change,
                     label_visibility="collapsed")
        b1, b2, b3 = st.columns([2, 1, 2])
        b1.button(f"🎨 {prompts.ANALYZE_LABEL}", on_click=dispatch, args=({"type": "analyze"},))
        b2.button(prompts.CLEAR_LABEL, on_click=dispatch, args=({"type": "clear_text"},))
        b3.markdown(prompts.DETECTED_TEMPLATE.format(name=_state().preset.name))

        st.divider()
        st.caption(prompts.CHIPS_LABEL)
        chips = keyword_chips()
        cols = st.columns(5)
        for i, chip in enumerate(chips):
            cols[i % 5].button(chip["word"], key=f"chip-{chip['id']}", on_click=dispatch,
                               args=({"type": "add_keyword", "word": chip["word"]},))

        state = _state()
        st.subheader(f"✨ {prompts.TASKS_HEADER}")
        st.markdown(prompts.TASKS_CAPTION.format(name=state.preset.name))
        for s in current_suggestions(state):
            st.checkbox(
                s["text"],
                value=s["done"],
                disabled=s["done"],
                key=f"task-{s['id']}",
                on_change=dispatch,
                args=({"type": "complete_task", "task_id": s["id"]},),
            )
        p1, p2 = st.columns(2)
        p1.markdown(prompts.POINTS_LABEL)
        p2.markdown(f"**{prompts.POINTS_TEMPLATE.format(points=state.points)}**")
        st.caption(f"{prompts.RAINBOW_CAPTION} {rainbow_label(state.rainbow)}")
        st.markdown(rainbow_html(state.rainbow), unsafe_allow_html=True)

    with right:
        state = _state()
        preset = state.preset
        st.subheader(f"😊 {prompts.VISUAL_HEADER} · 🎨 {preset.name}")
        st.markdown(visual_html(VISUAL_STYLES[preset.key], preset.color, state.auto_breath), unsafe_allow_html=True)
        st.caption(prompts.VISUAL_NOTE)

        st.subheader(f"🗺️ {prompts.JOURNEY_HEADER}")
        history = list(state.history)
        st.area_chart(to_frame(history)[["valence"]], height=240)
        st.markdown(legend_html(), unsafe_allow_html=True)
        summary = trend_summary(history)
        ok, reason = validate_history(history)
        if summary["count"]:
            st.caption(f"{summary['count']} 天 · 平均 {summary['mean_valence']:+.2f}" + ("" if ok else f" · ⚠️ {reason}"))

    st.divider()
    st.caption(prompts.FOOTER_TEMPLATE.format(year=datetime.now().year))


if __name__ == "__main__":
    main()
