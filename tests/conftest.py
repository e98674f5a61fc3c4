import json
from types import SimpleNamespace

import pytest

from app import create_app
from openai_client import Settings

GAME_HTML = "<html><head></head><body><script>let t=0;</script></body></html>"


def completion(*contents):
    """Build a chat-completion-shaped object, one choice per content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


class FakeOpenAI:
    """Records chat.completions.create calls and replays canned output."""

    def __init__(self, *contents, error=None):
        self.calls = []
        self._response = completion(*contents) if contents else completion("")
        self._error = error
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self._response

    @property
    def user_message(self):
        return self.calls[-1]["messages"][-1]["content"]


@pytest.fixture
def fake_openai():
    return FakeOpenAI(json.dumps({"reply": "A neon shooter.", "html": GAME_HTML}))


@pytest.fixture
def settings():
    return Settings(api_key="sk-test", model="test-model")


@pytest.fixture
def make_client(settings):
    """Flask test client wired to a given fake model."""
    def _make(fake, settings=settings):
        app = create_app(settings=settings, client_factory=lambda s: fake)
        app.config["TESTING"] = True
        return app.test_client()
    return _make
