from __future__ import annotations

import json
from typing import Any, List

import pytest
import requests
from fastapi.testclient import TestClient

from tweetforge.core.config import Settings
from tweetforge.core.db import Base, build_engine, build_session_factory
from tweetforge.main import create_app
from tweetforge.models import tweet, user  # noqa: F401
from tweetforge.repositories.storage import DatabaseStorage

TEST_API_URL = "https://inference.test/v3/inference/chat/"


def make_settings(**overrides: Any) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "LYZR_API_URL": TEST_API_URL,
        "LYZR_API_KEY": "test-key",
        "LYZR_USER_ID": "user-1",
        "LYZR_AGENT_ID": "agent-1",
        "LYZR_SESSION_ID": "session-1",
        "CORS_ALLOW_ORIGINS": ["*"],
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        if self._body is not None:
            return self._body
        return json.loads(self.text)


class Upstream:
    """Records calls to requests.post and answers with a canned response."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self.response = FakeResponse(body={"response": "A generated tweet."})
        self.error: Exception | None = None

    def reply(self, body: Any = None, status_code: int = 200, text: str | None = None) -> None:
        self.response = FakeResponse(status_code=status_code, body=body, text=text)

    def __call__(self, url: str, json: Any = None, headers: Any = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def upstream(monkeypatch) -> Upstream:
    fake = Upstream()
    monkeypatch.setattr(requests, "post", fake)
    return fake


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def storage(settings) -> DatabaseStorage:
    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    yield DatabaseStorage(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
def client(settings, storage, upstream) -> TestClient:
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client
