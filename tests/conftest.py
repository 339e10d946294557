# tests/conftest.py
import json
import os

import httpx
import pytest
from fastapi.testclient import TestClient

# Settings are read at import time, so these must be set before importing the app
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")
os.environ.setdefault("OPENROUTER_MODEL", "test/model")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from app.api import deps
from app.core.engine import OpenRouterEngine
from app.core.use_case import GenerateInterviewUseCase
from app.main import app
from app.storages.interview_storage import InterviewStorage


def completion(content=None, reasoning_details=None, usage=None):
    message = {"role": "assistant"}
    if content is not None:
        message["content"] = content
    if reasoning_details is not None:
        message["reasoning_details"] = reasoning_details
    payload = {"choices": [{"message": message}]}
    if usage is not None:
        payload["usage"] = usage
    return payload


class FakeOpenRouter:
    """Scripted replacement for the OpenRouter endpoint."""

    def __init__(self):
        self.responses = []
        self.requests = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        return httpx.Response(200, json=item)

    @property
    def bodies(self):
        return [json.loads(request.content) for request in self.requests]


class FailingStorage:
    def __init__(self, message="firestore unavailable"):
        self.message = message
        self.attempts = 0

    def add(self, record):
        self.attempts += 1
        raise RuntimeError(self.message)


@pytest.fixture
def openrouter():
    return FakeOpenRouter()


@pytest.fixture
def storage():
    return InterviewStorage()


@pytest.fixture
def engine(openrouter):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(openrouter.handler))
    return OpenRouterEngine(
        api_key="test-key",
        model="test/model",
        url="https://openrouter.test/api/v1/chat/completions",
        client=http_client,
    )


@pytest.fixture
def make_client(engine):
    def _make(storage_backend):
        use_case = GenerateInterviewUseCase(engine, storage_backend)
        app.dependency_overrides[deps.get_use_case] = lambda: use_case
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, storage):
    return make_client(storage)


def stored(storage):
    return list(storage._interviews.values())
