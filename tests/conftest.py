import pytest
from fastapi.testclient import TestClient

from career_api.core.store import ResultStore
from career_api.main import app
from career_api.routes import get_store
from career_api.services import llm


class FakeLLM:
    """Stands in for llm.chat; each call returns a distinct analysis."""

    def __init__(self):
        self.calls = []
        self.error = None

    def __call__(self, system, user, model, temperature, max_tokens):
        self.calls.append(
            {"system": system, "user": user, "model": model, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return f"<h3>Analyse {len(self.calls)}</h3>"


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(llm, "chat", fake)
    return fake


@pytest.fixture
def store():
    return ResultStore()


@pytest.fixture
def client(store, fake_llm):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def form_data():
    return {
        "age": "17",
        "education": "abitur",
        "situation": "abitur",
        "interests": ["Technik", "IT"],
        "strengths": "Logisches Denken",
        "location": "Berlin",
    }
