"""Request-scoped domain models exchanged between the API layer and LLM clients."""
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: Role
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(..., min_length=1)
    model: str | None = None
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = Field(default=None, ge=1)


class CompletionRequest(BaseModel):
    prompt: str
    model: str | None = None
    max_tokens: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0, le=2)


class Usage(BaseModel):
    """Token accounting as reported by the provider."""

    prompt_tokens: int = Field(..., ge=0)
    completion_tokens: int = Field(..., ge=0)
    total_tokens: int = Field(..., ge=0)


class ChatResult(BaseModel):
    message: ChatMessage
    model: str
    usage: Usage | None = None


class CompletionResult(BaseModel):
    text: str
    model: str
    usage: Usage | None = None


class ModelInfo(BaseModel):
    id: str
    object: str
    created: int
    owned_by: str
