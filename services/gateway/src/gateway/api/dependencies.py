"""FastAPI dependencies: per-request LLM client and GraphQL context."""
from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from gateway.client import LLMClient, build_llm_client


class GatewayContext(BaseContext):
    """GraphQL execution context; carries exactly the request's LLM client."""

    def __init__(self, llm: LLMClient) -> None:
        super().__init__()
        self.llm = llm


def get_llm_client(request: Request) -> LLMClient:
    return build_llm_client(request.app.state.settings)


async def get_context(llm: LLMClient = Depends(get_llm_client)) -> GatewayContext:
    return GatewayContext(llm=llm)
