from gateway.client.base import LLMClient
from gateway.client.mock_client import MockLLMClient
from gateway.client.openai_client import OpenAIClient
from gateway.config import GatewaySettings

__all__ = ["LLMClient", "MockLLMClient", "OpenAIClient", "build_llm_client"]


def build_llm_client(settings: GatewaySettings) -> LLMClient:
    """Fresh client for one request; raises ConfigurationError without a credential."""
    if settings.mock:
        return MockLLMClient()
    return OpenAIClient(
        settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout_seconds,
    )
