from types import SimpleNamespace

import pytest

from app.core.config import settings
from app.core.errors import ConfigurationError, CredentialError, GenerationError
from app.services.generation_client import GenerationClient, get_generation_client, is_credential_error


class FakeCompletions:
    def __init__(self, content="Day 1: Hello", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(api_key="test-key", **completion_kwargs):
    completions = FakeCompletions(**completion_kwargs)
    sdk = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return GenerationClient(api_key=api_key, model="gemini-test", client=sdk), completions


def test_generate_returns_text_and_sends_token_ceiling():
    client, completions = make_client(content="Day 1: Arrival")

    assert client.generate("Plan a trip", max_tokens=2000) == "Day 1: Arrival"
    (call,) = completions.calls
    assert call["model"] == "gemini-test"
    assert call["max_tokens"] == 2000
    assert call["messages"] == [{"role": "user", "content": "Plan a trip"}]


def test_missing_key_fails_before_calling_out():
    client, completions = make_client(api_key=None)

    assert not client.is_configured
    with pytest.raises(ConfigurationError):
        client.generate("Plan a trip", max_tokens=10)
    assert completions.calls == []


def test_credential_failures_are_distinguished():
    client, _ = make_client(error=RuntimeError("API key not valid. Please pass a valid API key."))

    with pytest.raises(CredentialError) as excinfo:
        client.generate("Plan a trip", max_tokens=10)
    assert "API key" in str(excinfo.value.__cause__)


def test_other_failures_are_generic():
    client, completions = make_client(error=ConnectionError("connection reset by peer"))

    with pytest.raises(GenerationError) as excinfo:
        client.generate("Plan a trip", max_tokens=10)
    assert not isinstance(excinfo.value, CredentialError)
    assert excinfo.value.message == "Failed to generate trip plan. Please try again."
    assert len(completions.calls) == 1


def test_empty_model_output_becomes_empty_text():
    client, _ = make_client(content=None)

    assert client.generate("Plan a trip", max_tokens=10) == ""


def test_is_credential_error():
    assert is_credential_error(Exception("400 API_KEY_INVALID"))
    assert not is_credential_error(Exception("quota exceeded"))


def test_client_built_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "GOOGLE_GENERATIVE_AI_API_KEY", "from-env")
    monkeypatch.setattr(settings, "GENERATION_MODEL", "gemini-1.5-flash")

    client = get_generation_client()

    assert client.is_configured
    assert client.model == "gemini-1.5-flash"
    assert client.base_url == settings.GENERATION_API_BASE
