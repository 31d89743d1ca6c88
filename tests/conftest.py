import json

import pytest

from utils.config import Config


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    """Records requests and replays queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def _handle(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._handle("PATCH", url, **kwargs)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def config(tmp_path):
    return Config(
        openrouter_api_key="test-key",
        discord_webhook_url="https://chat.example/hook/ABC?thread_id=99",
        output_dir=str(tmp_path),
    )


@pytest.fixture
def horoscope():
    return {
        "summary": "Mercury hums along quietly.",
        "signs": [
            {"name": "Aries", "emoji": "♈", "text": "Push forward. Someone notices."},
            {"name": "Taurus", "emoji": "♉", "text": "Stay grounded. Eat well."},
        ],
        "date": "October 19, 2026",
    }
