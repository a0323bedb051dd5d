# File: app/services/generation_client.py

import logging

import openai
from openai import OpenAI

from app.core.config import settings
from app.core.errors import ConfigurationError, CredentialError, GenerationError

logger = logging.getLogger(__name__)

# Substrings in a provider error that point at a bad or missing credential
CREDENTIAL_ERROR_MARKERS = ("API key", "api_key", "API_KEY_INVALID", "Unauthorized")


def is_credential_error(exc: Exception) -> bool:
    if isinstance(exc, openai.AuthenticationError):
        return True
    text = str(exc)
    return any(marker in text for marker in CREDENTIAL_ERROR_MARKERS)


class GenerationClient:
    """
    Sends a prompt to the hosted text-generation model and returns the raw text.

    One attempt per call: the SDK's own retries are switched off, so a failure
    goes straight back to the caller, who may simply call again.
    """

    def __init__(self, api_key: str | None, model: str, base_url: str | None = None, client=None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self) -> None:
        if not self.is_configured:
            logger.error("Generation API key is not configured")
            raise ConfigurationError()

    def _get_client(self):
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url, max_retries=0)
        return self._client

    def generate(self, prompt: str, max_tokens: int) -> str:
        self.ensure_configured()
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.exception("Text generation failed (model=%s)", self.model)
            if is_credential_error(e):
                raise CredentialError() from e
            raise GenerationError() from e

        text = response.choices[0].message.content or ""
        logger.info("Generated %d characters (model=%s, max_tokens=%d)", len(text), self.model, max_tokens)
        return text


def get_generation_client() -> GenerationClient:
    return GenerationClient(
        api_key=settings.GOOGLE_GENERATIVE_AI_API_KEY,
        model=settings.GENERATION_MODEL,
        base_url=settings.GENERATION_API_BASE,
    )
