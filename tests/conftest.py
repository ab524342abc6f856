"""Shared fixtures: a recording fake of the tailoring backend."""

import json
from typing import Callable, List

import httpx
import pytest

BACKEND_BASE = "http://backend.test"

SAMPLE_RESULT = {
    "tailored_resume": "X",
    "matched_keywords": ["a"],
    "missing_but_referenced_keywords": [],
    "ats_tips": ["tip1"],
}

BACKEND_ENV_VARS = [
    "TAILOR_BACKEND_URL",
    "BACKEND_URL",
    "VITE_BACKEND_URL",
    "PORT",
    "TAILOR_PORT",
    "TAILOR_HOST",
    "TAILOR_DEBUG",
    "TAILOR_HTTP_TIMEOUT",
    "TAILOR_CORS_ORIGINS",
]


class RecordingBackend:
    """Wraps a handler and keeps every request the client sent."""

    def __init__(self, handler: Callable):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def bodies(self) -> List[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def make_backend():
    """Factory for a RecordingBackend around any handler."""
    return RecordingBackend


@pytest.fixture
def ok_backend():
    """Backend that answers 200 with SAMPLE_RESULT."""
    return RecordingBackend(lambda request: httpx.Response(200, json=SAMPLE_RESULT))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every env var the console configuration reads."""
    for name in BACKEND_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_result() -> dict:
    return dict(SAMPLE_RESULT)


@pytest.fixture
def backend_base() -> str:
    return BACKEND_BASE
