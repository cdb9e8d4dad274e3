"""GraphQL gateway in front of an OpenAI-compatible LLM provider."""
