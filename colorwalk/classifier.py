# colorwalk/classifier.py
# Module: keyword emotion classifier (deterministic, no model calls by default).
# Maps free text to one of the fixed presets; always returns a valid preset.

import logging
import os
import re
from typing import Optional

import requests

from colorwalk.presets import EMOTION_PRESETS, PRIORITY_ORDER, EmotionPreset, neutral
from colorwalk.prompts import CLASSIFIER_SYSTEM, CLASSIFIER_USER_TEMPLATE

logger = logging.getLogger(__name__)

# English fallback, tested against the lowercased input
FALLBACK_PATTERNS = {
    "joy": re.compile(r"happy|joy|glad|excited"),
    "calm": re.compile(r"calm|relax|peace"),
    "anxious": re.compile(r"anxious|worry|nervous"),
    "sad": re.compile(r"sad|down|blue"),
}

# the reply must open with the key; anything after it is ignored
ANSWER_REGEX = re.compile(r"^[\W_]*(joy|calm|anxious|sad|neutral)\b", re.IGNORECASE)


def classify(text: str) -> EmotionPreset:
    t = (text or "").strip()
    if not t:
        return neutral()
    lowered = t.lower()
    for key in PRIORITY_ORDER:
        preset = EMOTION_PRESETS[key]
        if any(k in t for k in preset.examples):
            logger.debug("keyword match %s", key)
            return preset
        if FALLBACK_PATTERNS[key].search(lowered):
            logger.debug("fallback pattern match %s", key)
            return preset
    return neutral()


def parse_answer(answer: str) -> Optional[EmotionPreset]:
    """Preset named at the start of a model reply, if any."""
    if not answer:
        return None
    m = ANSWER_REGEX.match(answer.strip())
    if not m:
        return None
    return EMOTION_PRESETS[m.group(1).lower()]


def classify_remote(text: str) -> EmotionPreset:
    """
    Ask a hosted model for the category. Falls back to keyword matching on
    empty input, missing key, transport errors or an unusable answer.
    """
    # imported lazily so the keyword path never needs a configured client
    from colorwalk.clients.universal_client import call_llm, has_credentials

    t = (text or "").strip()
    if not t:
        return neutral()
    if not has_credentials():
        logger.warning("LLM classifier selected but LLM_API_KEY is empty; using keywords")
        return classify(t)

    try:
        answer = call_llm(
            [{"role": "user", "content": CLASSIFIER_USER_TEMPLATE.format(text=t)}],
            system=CLASSIFIER_SYSTEM,
            temperature=0.0,
            max_tokens=8,
        )
    except (requests.RequestException, ValueError, KeyError) as e:
        logger.warning("remote classification failed (%s); using keywords", e)
        return classify(t)

    preset = parse_answer(answer)
    if preset is None:
        logger.warning("unrecognized model answer %r; using keywords", answer)
        return classify(t)
    return preset


def analyze_text(text: str) -> EmotionPreset:
    mode = os.getenv("COLOR_WALK_CLASSIFIER", "keyword").strip().lower()
    if mode == "llm":
        return classify_remote(text)
    return classify(text)
