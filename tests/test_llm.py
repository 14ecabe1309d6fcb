from types import SimpleNamespace

import pytest

from career_api import config
from career_api.services import llm


class FakeCompletions:
    def __init__(self, content="<h3>Hallo</h3>", error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _install_openai(monkeypatch, completions):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(llm, "_openai_client", client)
    monkeypatch.setattr(config, "LLM_PROVIDER", "openai")


def test_openai_request_shape(monkeypatch):
    completions = FakeCompletions()
    _install_openai(monkeypatch, completions)

    out = llm.chat("system text", "user text", model="gpt-4o", temperature=0.7, max_tokens=4000)

    assert out == "<h3>Hallo</h3>"
    assert completions.kwargs == {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ],
        "temperature": 0.7,
        "max_tokens": 4000,
    }


def test_openai_failure_is_generation_error(monkeypatch):
    _install_openai(monkeypatch, FakeCompletions(error=TimeoutError("timed out")))
    with pytest.raises(llm.GenerationError, match="timed out"):
        llm.chat("s", "u", model="gpt-4o", temperature=0.7, max_tokens=10)


def test_openai_empty_content_is_generation_error(monkeypatch):
    _install_openai(monkeypatch, FakeCompletions(content=""))
    with pytest.raises(llm.GenerationError):
        llm.chat("s", "u", model="gpt-4o", temperature=0.7, max_tokens=10)


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload


def test_ollama_provider(monkeypatch):
    captured = {}

    def fake_post(url, json, timeout):
        captured.update(url=url, json=json)
        return FakeResponse(200, {"message": {"content": "Antwort"}})

    monkeypatch.setattr(config, "LLM_PROVIDER", "ollama")
    monkeypatch.setattr(llm.requests, "post", fake_post)

    assert llm.chat("s", "u", model="ignored", temperature=0.7, max_tokens=500) == "Antwort"
    assert captured["url"] == config.OLLAMA_URL
    assert captured["json"]["model"] == config.OLLAMA_MODEL
    assert captured["json"]["options"] == {"temperature": 0.7, "num_predict": 500}
    assert captured["json"]["stream"] is False


def test_ollama_error_status(monkeypatch):
    monkeypatch.setattr(config, "LLM_PROVIDER", "ollama")
    monkeypatch.setattr(llm.requests, "post", lambda url, json, timeout: FakeResponse(500, text="model not found"))

    with pytest.raises(llm.GenerationError, match="model not found"):
        llm.chat("s", "u", model="ignored", temperature=0.0, max_tokens=10)
