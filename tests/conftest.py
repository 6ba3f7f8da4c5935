from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from flashdeck.core.config import get_settings
from flashdeck.main import create_app
from flashdeck.services.persistence import PersistenceAdapter
from flashdeck.services.storage import KeyValueStorage
from flashdeck.services.study_session import StudySession


class _Usage:
    def __init__(self, prompt_tokens=12, completion_tokens=8):
        self.prompt_tokens = prompt_tokens
        self.completion_tokens = completion_tokens

    def model_dump(self):
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.prompt_tokens + self.completion_tokens,
        }


class FakeCompletions:
    """Remplace client.chat.completions : enregistre les appels, renvoie `reply` ou lève `error`."""

    def __init__(self, reply="Réponse de test", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=_Usage())


class FakeOpenAI:
    def __init__(self, reply="Réponse de test", error=None):
        self.completions = FakeCompletions(reply=reply, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def storage(tmp_path):
    return KeyValueStorage(base_path=str(tmp_path / "kv"))


@pytest.fixture
def persistence(storage):
    return PersistenceAdapter(storage)


@pytest.fixture
def session(persistence):
    return StudySession.load(persistence)


@pytest.fixture
def test_client(tmp_path, monkeypatch):
    """
    Crée un TestClient avec un STORAGE_PATH temporaire (isolé),
    et force quelques variables d'env pour les tests.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "Flashdeck (tests)")
    monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "storage"))
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.setenv("OPENAI_API_KEY", "")  # pas d'appel réseau

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()

    app = create_app()
    yield TestClient(app)

    get_settings.cache_clear()


@pytest.fixture
def make_openai():
    """Fabrique de faux clients OpenAI : make_openai(reply=..., error=...)."""
    return FakeOpenAI
