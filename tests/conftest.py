import json
from typing import Any, Dict, List, Optional

import pytest

from idverify.config import settings


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, content: Optional[bytes] = None):
        if content is None:
            content = b"" if body is None else json.dumps(body).encode("utf-8")
        self.content = content
        self.status_code = status_code

    def json(self) -> Any:
        return json.loads(self.content)


class RecordingPost:
    """Stands in for requests.post and remembers every request"""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.response = FakeResponse({})
        self.error: Optional[Exception] = None

    def respond_with(self, body: Any = None, status_code: int = 200, content: Optional[bytes] = None) -> None:
        self.response = FakeResponse(body, status_code, content)

    def __call__(self, url, json=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]

    @property
    def payload(self) -> Dict[str, Any]:
        return self.calls[-1]["json"]


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", "")
    monkeypatch.setattr(settings, "DEFAULT_REGION", "US")
    monkeypatch.setattr(settings, "US_API_BASE_URL", "https://api.example.com")
    monkeypatch.setattr(settings, "EU_API_BASE_URL", "https://api-eu.example.com")
    monkeypatch.setattr(settings, "CLIENT_ID", "python-sdk")
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT", None)
    monkeypatch.setattr(settings, "STRICT_DECODE", False)
    monkeypatch.setattr(settings, "ADDRESS_POLICY", "stdlib")
    return settings


@pytest.fixture
def fake_post(monkeypatch):
    recorder = RecordingPost()
    monkeypatch.setattr("idverify.transport.requests.post", recorder)
    return recorder


@pytest.fixture
def inline_image() -> str:
    # Long enough to be taken as pre-encoded content
    return "iVBORw0KGgo" + "A" * 200


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "document.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg\x00\x01\x02")
    return path
