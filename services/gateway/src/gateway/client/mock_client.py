"""Mock LLM client for local development: echoes input, reports whitespace-token usage."""
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

MOCK_MODELS_CREATED = 1_700_000_000


def _count_tokens(text: str) -> int:
    return len(text.split())


def _usage(prompt: str, answer: str) -> Usage:
    prompt_tokens = _count_tokens(prompt)
    completion_tokens = _count_tokens(answer)
    return Usage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
    )


class MockLLMClient(LLMClient):
    async def chat(self, request: ChatRequest) -> ChatResult:
        params = chat_params(request)
        last_user = next(
            (m.content for m in reversed(request.messages) if m.role == "user"),
            request.messages[-1].content,
        )
        answer = f"Mock reply: {last_user}"
        prompt = "\n".join(m.content for m in request.messages)
        return ChatResult(
            message=ChatMessage(role="assistant", content=answer),
            model=params["model"],
            usage=_usage(prompt, answer),
        )

    async def completion(self, request: CompletionRequest) -> CompletionResult:
        params = completion_params(request)
        answer = f"Mock completion: {request.prompt}"
        return CompletionResult(
            text=answer,
            model=params["model"],
            usage=_usage(request.prompt, answer),
        )

    async def list_models(self) -> list[ModelInfo]:
        return [
            ModelInfo(id=model_id, object="model", created=MOCK_MODELS_CREATED, owned_by="mock")
            for model_id in ("gpt-3.5-turbo", "gpt-3.5-turbo-instruct")
        ]
