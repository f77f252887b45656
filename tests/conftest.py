import httpx
import pytest
from fastapi.testclient import TestClient

from taskplan.core.config import Settings
from taskplan.main import create_app

_ENV_VARS = (
    "AI_API_KEY", "AI_MODEL", "AI_BASE_URL", "APP_ENV", "CLIENT_DIST_DIR", "PORT", "HOST", "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    # Ensure a developer's env never switches the suite out of fallback mode
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def model_transport(text: str, calls: list | None = None, status_code: int = 200) -> httpx.MockTransport:
    """Fake Gemini endpoint answering every call with `text` as the model output."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=gemini_reply(text))

    return httpx.MockTransport(handler)


def raw_plan(n_steps: int = 5, **fields) -> dict:
    plan = {
        "goal": "Launch a podcast",
        "assumptions": ["Solo host"],
        "steps": [
            {"step": i, "title": f"Title {i}", "description": f"Description {i}"}
            for i in range(1, n_steps + 1)
        ],
        "risks": ["Low audience"],
    }
    plan.update(fields)
    return plan


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def model_client():
    """Client with an API key set and the model call answered by a fake transport."""

    def _make(text: str, calls: list | None = None, status_code: int = 200) -> TestClient:
        app = create_app(
            make_settings(AI_API_KEY="test-key"),
            llm_transport=model_transport(text, calls, status_code),
        )
        return TestClient(app)

    return _make

