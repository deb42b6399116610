import json
from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from gotify_relay.config import RelayConfig
from gotify_relay.main import create_app
from gotify_relay.services.gotify_service import GotifyService, get_gotify_service

GOTIFY_URL = "http://gotify.test/message"
GOTIFY_TOKEN = "pytest-token"


class GotifyRecorder:
    """Stand-in for a Gotify server, records every message it receives"""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error: Exception | None = None
        self.transport = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"id": len(self.requests)})

    @property
    def messages(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(gotify_url=GOTIFY_URL, gotify_token=GOTIFY_TOKEN)


@pytest.fixture
def gotify() -> GotifyRecorder:
    return GotifyRecorder()


@pytest.fixture
def client(relay_config: RelayConfig, gotify: GotifyRecorder) -> Generator[TestClient, None, None]:
    app = create_app(relay_config)
    app.dependency_overrides[get_gotify_service] = lambda: GotifyService(relay_config, transport=gotify.transport)
    with TestClient(app) as test_client:
        yield test_client


def alert_json(
    status: str = "firing",
    labels: dict | None = None,
    annotations: dict | None = None,
    starts_at: str = "2024-01-15T10:30:00Z",
    ends_at: str = "2024-01-15T11:00:00Z",
) -> dict:
    return {
        "status": status,
        "labels": labels if labels is not None else {"alertname": "HighCPU", "instance": "host1"},
        "annotations": annotations if annotations is not None else {"ip": "10.0.0.1", "description": "CPU too high"},
        "startsAt": starts_at,
        "endsAt": ends_at,
    }
