"""Prometheus counters for provider traffic and token usage."""
from prometheus_client import Counter

from gateway.api.schemas import Usage

UPSTREAM_REQUESTS = Counter(
    "gateway_upstream_requests_total",
    "Calls made to the LLM provider.",
    ["operation", "outcome"],
)
TOKENS = Counter(
    "gateway_tokens_total",
    "Tokens reported by the LLM provider.",
    ["operation", "kind"],
)


def record_usage(operation: str, usage: Usage | None) -> None:
    if usage is None:
        return
    TOKENS.labels(operation=operation, kind="prompt").inc(usage.prompt_tokens)
    TOKENS.labels(operation=operation, kind="completion").inc(usage.completion_tokens)
