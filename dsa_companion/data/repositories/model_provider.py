"""
Chat-completion model provider client.

The client is built once at start-up and handed to whatever needs it through
a FastAPI dependency, so tests can swap in a fake with
``app.dependency_overrides[get_model_client]``.
"""
from typing import Optional, Protocol

import openai
from fastapi import Request

from dsa_companion.config import Config, logger
from dsa_companion.errors import ModelProviderException

ai_logger = logger.getChild("model_provider")


class ModelClient(Protocol):
    async def complete(self, prompt: str, temperature: float) -> Optional[str]:
        """Send one user-role prompt and return the reply text, if any."""
        ...


def key_fingerprint(key: str) -> str:
    """Return masked key for safe logging: sk-xxxx...1234"""
    if not key:
        return "(not set)"
    if len(key) <= 10:
        return key[:2] + "***"
    return key[:6] + "..." + key[-4:]


class OpenAIModelClient:
    """ModelClient backed by the OpenAI async SDK."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        client: Optional[openai.AsyncOpenAI] = None,
    ):
        self.model = model
        # Failures surface to the caller as-is; nothing in the request path retries.
        self._client = client or openai.AsyncOpenAI(
            api_key=api_key, base_url=base_url, max_retries=0
        )

    async def complete(self, prompt: str, temperature: float) -> Optional[str]:
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            ai_logger.error(f"Model provider call failed: {type(e).__name__}: {e}")
            raise ModelProviderException(detail="AI service error") from e

        if not completion.choices:
            return None
        return completion.choices[0].message.content

    async def close(self) -> None:
        await self._client.close()


def build_model_client() -> Optional[OpenAIModelClient]:
    """Construct the provider client from settings, or None when no key is configured."""
    api_key = Config.OPENAI_API_KEY.strip()
    ai_logger.info(f"OPENAI_API_KEY present: {bool(api_key)} ({key_fingerprint(api_key)})")
    if not api_key:
        ai_logger.warning("AI endpoints are disabled until OPENAI_API_KEY is set")
        return None
    return OpenAIModelClient(
        api_key=api_key, model=Config.OPENAI_MODEL, base_url=Config.OPENAI_BASE_URL
    )


def get_model_client(request: Request) -> ModelClient:
    client = getattr(request.app.state, "model_client", None)
    if client is None:
        raise ModelProviderException(detail="AI service is not configured")
    return client
