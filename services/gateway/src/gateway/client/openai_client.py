"""OpenAI-backed LLM client: maps domain requests to SDK calls and back."""
from typing import Any

import structlog
from openai import AsyncOpenAI

from gateway.api.schemas import (
    ChatMessage,
    ChatRequest,
    ChatResult,
    CompletionRequest,
    CompletionResult,
    ModelInfo,
    Usage,
)
from gateway.client.base import LLMClient, chat_params, completion_params
from gateway.errors import ConfigurationError, UpstreamCallError, UpstreamResponseError
from gateway.metrics import UPSTREAM_REQUESTS, record_usage

logger = structlog.get_logger(__name__)


def _usage(raw: Any) -> Usage | None:
    if raw is None:
        return None
    return Usage(
        prompt_tokens=raw.prompt_tokens,
        completion_tokens=raw.completion_tokens,
        total_tokens=raw.total_tokens,
    )


def _describe(exc: Exception) -> str:
    return str(exc) or "Unknown error"


class OpenAIClient(LLMClient):
    """Thin adapter over ``AsyncOpenAI``; one provider call per operation, no retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured")
        kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if base_url:
            kwargs["base_url"] = base_url
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._client = AsyncOpenAI(**kwargs)

    async def chat(self, request: ChatRequest) -> ChatResult:
        params = chat_params(request)
        try:
            response = await self._client.chat.completions.create(
                messages=[m.model_dump() for m in request.messages],
                **params,
            )
        except Exception as e:
            UPSTREAM_REQUESTS.labels(operation="chat", outcome="error").inc()
            logger.error("openai_chat_failed", model=params["model"], error=_describe(e))
            raise UpstreamCallError(f"Failed to generate chat response: {_describe(e)}") from e

        choice = response.choices[0] if response.choices else None
        message = getattr(choice, "message", None)
        if message is None:
            UPSTREAM_REQUESTS.labels(operation="chat", outcome="empty").inc()
            logger.error("openai_chat_empty", model=response.model)
            raise UpstreamResponseError("No message in response")

        usage = _usage(response.usage)
        UPSTREAM_REQUESTS.labels(operation="chat", outcome="ok").inc()
        record_usage("chat", usage)
        return ChatResult(
            message=ChatMessage(role=message.role, content=message.content or ""),
            model=response.model,
            usage=usage,
        )

    async def completion(self, request: CompletionRequest) -> CompletionResult:
        params = completion_params(request)
        try:
            response = await self._client.completions.create(prompt=request.prompt, **params)
        except Exception as e:
            UPSTREAM_REQUESTS.labels(operation="completion", outcome="error").inc()
            logger.error("openai_completion_failed", model=params["model"], error=_describe(e))
            raise UpstreamCallError(f"Failed to generate completion: {_describe(e)}") from e

        choice = response.choices[0] if response.choices else None
        # "" is a valid completion; only a missing field is an error
        text = getattr(choice, "text", None)
        if text is None:
            UPSTREAM_REQUESTS.labels(operation="completion", outcome="empty").inc()
            logger.error("openai_completion_empty", model=response.model)
            raise UpstreamResponseError("No text in response")

        usage = _usage(response.usage)
        UPSTREAM_REQUESTS.labels(operation="completion", outcome="ok").inc()
        record_usage("completion", usage)
        return CompletionResult(text=text, model=response.model, usage=usage)

    async def list_models(self) -> list[ModelInfo]:
        try:
            models = [
                ModelInfo(
                    id=model.id,
                    object=model.object,
                    created=model.created,
                    owned_by=model.owned_by,
                )
                async for model in self._client.models.list()
            ]
        except Exception as e:
            UPSTREAM_REQUESTS.labels(operation="models", outcome="error").inc()
            logger.error("openai_models_failed", error=_describe(e))
            raise UpstreamCallError(f"Failed to fetch models: {_describe(e)}") from e
        UPSTREAM_REQUESTS.labels(operation="models", outcome="ok").inc()
        return models
