"""Vision LLM clients used by the image-to-code scanner."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .sim_types import ImagePayload
from . import constants

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base for vision-capable LLM API clients."""

    @abstractmethod
    def describe_image(
        self, prompt: str, image: ImagePayload, max_tokens: int = 4096
    ) -> str:
        """Send *prompt* and *image* to the model and return the raw text response."""
        ...


class ClaudeLLMClient(LLMClient):
    """Wraps anthropic.Anthropic() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(
        self, model: str = "claude-sonnet-4-20250514", client: Any = _LAZY_IMPORT
    ):
        if client is ClaudeLLMClient._LAZY_IMPORT:
            import anthropic

            self._client = anthropic.Anthropic()
        else:
            self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def describe_image(
        self, prompt: str, image: ImagePayload, max_tokens: int = 4096
    ) -> str:
        logger.debug(
            "ClaudeLLMClient.describe_image: model=%s, media_type=%s",
            self._model,
            image.media_type,
        )
        response = self._client.messages.create(
            model=self._model,
            max_tokens=max_tokens,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": image.media_type,
                                "data": image.data,
                            },
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        return response.content[0].text


class OpenAILLMClient(LLMClient):
    """Wraps openai.OpenAI() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(self, model: str = "gpt-4o", client: Any = _LAZY_IMPORT):
        if client is OpenAILLMClient._LAZY_IMPORT:
            import openai

            self._client = openai.OpenAI()
        else:
            self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def describe_image(
        self, prompt: str, image: ImagePayload, max_tokens: int = 4096
    ) -> str:
        logger.debug(
            "OpenAILLMClient.describe_image: model=%s, media_type=%s",
            self._model,
            image.media_type,
        )
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": image.data_url}},
                    ],
                }
            ],
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content


def get_llm_client(
    provider: str = constants.PROVIDER_CLAUDE,
    model: str = "",
    client: Any = None,
) -> LLMClient:
    """Factory for LLM clients.

    Args:
        provider: "claude" or "openai"
        model: Model name override (empty string = use default)
        client: Pre-built API client for DI/testing
    """
    kwargs: dict[str, Any] = {}
    if model:
        kwargs["model"] = model
    if client is not None:
        kwargs["client"] = client

    if provider == constants.PROVIDER_CLAUDE:
        return ClaudeLLMClient(**kwargs)
    if provider == constants.PROVIDER_OPENAI:
        return OpenAILLMClient(**kwargs)

    raise ValueError(f"Unknown LLM provider: {provider}")
