"""GraphQL schema: types, resolvers and the process-wide schema object.

Resolvers only translate between GraphQL types and the domain models in
``gateway.api.schemas`` and delegate to the LLM client found in the context.
Client errors are not caught here; strawberry reports them in ``errors``.
"""
from typing import Any, TypeVar

import strawberry
from pydantic import BaseModel, ValidationError
from strawberry.types import Info

from gateway.api import schemas
from gateway.api.dependencies import GatewayContext
from gateway.errors import InputValidationError

DomainT = TypeVar("DomainT", bound=BaseModel)


def _graphql_name(part: Any) -> str:
    if isinstance(part, int):
        return str(part)
    head, *rest = str(part).split("_")
    return head + "".join(word.title() for word in rest)


def _build(model: type[DomainT], /, **data: Any) -> DomainT:
    """Construct a domain model, reporting violations as one short line per field."""
    try:
        return model(**data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(_graphql_name(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors(include_url=False)
        ]
        raise InputValidationError("; ".join(problems)) from e


@strawberry.type(description="LLM model known to the provider")
class Model:
    id: str
    object: str
    created: int
    owned_by: str

    @classmethod
    def from_domain(cls, model: schemas.ModelInfo) -> "Model":
        return cls(id=model.id, object=model.object, created=model.created, owned_by=model.owned_by)


@strawberry.type(description="Token usage")
class Usage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    @classmethod
    def from_domain(cls, usage: schemas.Usage | None) -> "Usage | None":
        if usage is None:
            return None
        return cls(
            prompt_tokens=usage.prompt_tokens,
            completion_tokens=usage.completion_tokens,
            total_tokens=usage.total_tokens,
        )


@strawberry.type
class Message:
    role: str
    content: str


@strawberry.type(description="Chat response")
class ChatResponse:
    message: Message
    model: str
    usage: Usage | None = None

    @classmethod
    def from_domain(cls, result: schemas.ChatResult) -> "ChatResponse":
        return cls(
            message=Message(role=result.message.role, content=result.message.content),
            model=result.model,
            usage=Usage.from_domain(result.usage),
        )


@strawberry.type(description="Text completion response")
class CompletionResponse:
    text: str
    model: str
    usage: Usage | None = None

    @classmethod
    def from_domain(cls, result: schemas.CompletionResult) -> "CompletionResponse":
        return cls(text=result.text, model=result.model, usage=Usage.from_domain(result.usage))


@strawberry.input
class MessageInput:
    role: str = strawberry.field(description="system, user or assistant")
    content: str


@strawberry.input(description="Chat input")
class ChatInput:
    messages: list[MessageInput]
    model: str | None = strawberry.field(default=None, description="Defaults to gpt-3.5-turbo")
    temperature: float | None = strawberry.field(default=None, description="Randomness, 0-2")
    max_tokens: int | None = None

    def to_domain(self) -> schemas.ChatRequest:
        return _build(
            schemas.ChatRequest,
            messages=[{"role": m.role, "content": m.content} for m in self.messages],
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


@strawberry.input(description="Text completion input")
class CompletionInput:
    prompt: str
    model: str | None = strawberry.field(default=None, description="Defaults to gpt-3.5-turbo-instruct")
    max_tokens: int | None = None
    temperature: float | None = None

    def to_domain(self) -> schemas.CompletionRequest:
        return _build(
            schemas.CompletionRequest,
            prompt=self.prompt,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )


@strawberry.type
class Query:
    @strawberry.field(description="Liveness check")
    def health(self) -> str:
        return "OK"

    @strawberry.field(description="Models available from the provider")
    async def models(self, info: Info[GatewayContext, None]) -> list[Model]:
        models = await info.context.llm.list_models()
        return [Model.from_domain(m) for m in models]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Send a conversation and get the next assistant message")
    async def chat(self, info: Info[GatewayContext, None], input: ChatInput) -> ChatResponse:
        result = await info.context.llm.chat(input.to_domain())
        return ChatResponse.from_domain(result)

    @strawberry.mutation(description="Generate a text completion")
    async def completion(
        self, info: Info[GatewayContext, None], input: CompletionInput
    ) -> CompletionResponse:
        result = await info.context.llm.completion(input.to_domain())
        return CompletionResponse.from_domain(result)


schema = strawberry.Schema(query=Query, mutation=Mutation)
