import pytest
import requests

from colorwalk.clients import universal_client as uc


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self._payload


@pytest.fixture(autouse=True)
def _no_wait(monkeypatch):
    monkeypatch.setattr(uc.rate_limiter, "wait", lambda: 0.0)


def test_provider_detection(monkeypatch):
    assert uc._guess_provider_from_key("") == "none"
    assert uc._guess_provider_from_key("AIzaXYZ") == "gemini"
    assert uc._guess_provider_from_key("sk-or-abc") == "openai"
    monkeypatch.setenv("LLM_API_KEY", "sk-abc")
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    assert uc._detect() == ("gemini", "sk-abc")


def test_has_credentials(monkeypatch):
    assert uc.has_credentials() is False
    monkeypatch.setenv("LLM_API_KEY", "sk-abc")
    assert uc.has_credentials() is True


def test_call_without_key_raises():
    with pytest.raises(ValueError):
        uc.call_llm([{"role": "user", "content": "hi"}])


def test_base_url_and_model_overrides(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "sk-abc")
    monkeypatch.setenv("LLM_BASE_URL", "http://localhost:9999/v1/chat/completions")
    monkeypatch.setenv("OPENAI_MODEL", "tiny")
    seen = {}

    def fake_post(url, **kwargs):
        seen["url"] = url
        seen.update(kwargs)
        return FakeResponse({"choices": [{"text": " joy "}]})

    monkeypatch.setattr(requests, "post", fake_post)
    assert uc.call_llm([{"role": "user", "content": "hi"}], system="sys") == "joy"
    assert seen["url"] == "http://localhost:9999/v1/chat/completions"
    assert seen["json"]["model"] == "tiny"
    assert seen["json"]["messages"][0] == {"role": "system", "content": "sys"}
    assert seen["timeout"] == uc.TIMEOUT


def test_empty_completion_is_an_error(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "sk-abc")
    monkeypatch.setattr(requests, "post", lambda url, **kw: FakeResponse({"choices": [{"message": {"content": ""}}]}))
    with pytest.raises(ValueError):
        uc.call_llm([{"role": "user", "content": "hi"}])
