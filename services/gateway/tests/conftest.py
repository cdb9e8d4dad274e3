"""Shared fixtures: gateway app wired to a stubbed LLM client."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gateway.api.dependencies import get_llm_client
from gateway.config import GatewaySettings
from gateway.main import create_app


@pytest.fixture
def llm() -> MagicMock:
    llm = MagicMock()
    llm.chat = AsyncMock()
    llm.completion = AsyncMock()
    llm.list_models = AsyncMock(return_value=[])
    return llm


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(openai_api_key="sk-test", environment="development", json_logs=False)


@pytest.fixture
def app(settings: GatewaySettings, llm: MagicMock) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_llm_client] = lambda: llm
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
