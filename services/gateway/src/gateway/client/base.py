"""LLM client interface and request defaults."""
from abc import ABC, abstractmethod
from typing import Any

from gateway.api.schemas import (
    ChatRequest,
    ChatResult,
    CompletionRequest,
    CompletionResult,
    ModelInfo,
)

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo-instruct"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def chat_params(request: ChatRequest) -> dict[str, Any]:
    """Effective model/temperature/max_tokens for a chat call."""
    return {
        "model": request.model or DEFAULT_CHAT_MODEL,
        "temperature": _or_default(request.temperature, DEFAULT_TEMPERATURE),
        "max_tokens": _or_default(request.max_tokens, DEFAULT_MAX_TOKENS),
    }


def completion_params(request: CompletionRequest) -> dict[str, Any]:
    """Effective model/temperature/max_tokens for a completion call."""
    return {
        "model": request.model or DEFAULT_COMPLETION_MODEL,
        "temperature": _or_default(request.temperature, DEFAULT_TEMPERATURE),
        "max_tokens": _or_default(request.max_tokens, DEFAULT_MAX_TOKENS),
    }


class LLMClient(ABC):
    @abstractmethod
    async def chat(self, request: ChatRequest) -> ChatResult:
        """Generate the next assistant message for a conversation."""
        ...

    @abstractmethod
    async def completion(self, request: CompletionRequest) -> CompletionResult:
        """Generate a text completion for a prompt."""
        ...

    @abstractmethod
    async def list_models(self) -> list[ModelInfo]:
        """Return every model known to the provider."""
        ...
