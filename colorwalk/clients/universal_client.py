# clients/universal_client.py
# One-shot chat completion against an OpenAI-compatible or Gemini REST endpoint.
import os

import requests

from colorwalk.rate_limit import RateLimiter

DEFAULTS = {
    "openai_base": "https://openrouter.ai/api/v1/chat/completions",
    "gemini_base_root": "https://generativelanguage.googleapis.com/v1beta/models",
    "openai_model": "gpt-4o-mini",
    "gemini_model": "gemini-2.0-flash-lite",
}

TIMEOUT = 20

rate_limiter = RateLimiter(rpm=10, daily_limit=500)


def _guess_provider_from_key(key: str) -> str:
    if not key: return "none"
    if key.startswith("AIza"): return "gemini"
    return "openai"


def _detect():
    key = os.getenv("LLM_API_KEY", "").strip()
    provider = os.getenv("LLM_PROVIDER", "auto").strip().lower()
    if provider == "auto":
        provider = _guess_provider_from_key(key)
    return provider, key


def has_credentials() -> bool:
    provider, key = _detect()
    return bool(key) and provider != "none"


def _headers(key=None):
    h = {"Content-Type": "application/json"}
    if key:
        h["Authorization"] = f"Bearer {key}"
    return h


def _gemini_text(js: dict) -> str:
    return js["candidates"][0]["content"]["parts"][0]["text"].strip()


def _openai_text(js: dict) -> str:
    choice = js["choices"][0]
    if "message" in choice:
        return (choice["message"].get("content") or "").strip()
    return (choice.get("text") or "").strip()


def call_llm(messages, system=None, temperature=0.0, max_tokens=16):
    """
    Send `messages` (OpenAI-style role/content dicts) and return the reply text.
    Raises requests.RequestException on transport/HTTP errors and
    ValueError on a missing key, an empty/malformed body, or when the rate
    limiter refuses the call (RateLimitExceeded).
    """
    provider, key = _detect()
    if not key:
        raise ValueError("LLM_API_KEY is not set")
    base_url = os.getenv("LLM_BASE_URL", "").strip()

    rate_limiter.wait()

    if provider == "gemini":
        parts = []
        if system:
            parts.append(f"[SYSTEM]\n{system}")
        parts.extend(m.get("content", "") for m in messages if m.get("content"))
        model = os.getenv("GEMINI_MODEL", DEFAULTS["gemini_model"])
        url = base_url or f"{DEFAULTS['gemini_base_root']}/{model}:generateContent"
        data = {
            "contents": [{"parts": [{"text": "\n\n".join(parts)}]}],
            "generationConfig": {"temperature": temperature, "maxOutputTokens": max_tokens},
        }
        r = requests.post(url, params={"key": key}, json=data, headers=_headers(), timeout=TIMEOUT)
        r.raise_for_status()
        extract = _gemini_text
    else:
        data = {
            "model": os.getenv("OPENAI_MODEL", DEFAULTS["openai_model"]),
            "messages": ([{"role": "system", "content": system}] if system else []) + list(messages),
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        r = requests.post(base_url or DEFAULTS["openai_base"], json=data, headers=_headers(key), timeout=TIMEOUT)
        r.raise_for_status()
        extract = _openai_text

    try:
        text = extract(r.json())
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(f"unexpected response shape: {e}") from e
    if not text:
        raise ValueError("empty completion")
    return text
