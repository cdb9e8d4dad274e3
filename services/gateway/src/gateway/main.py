"""Gateway service entrypoint - GraphQL API in front of the LLM provider."""
from fastapi import FastAPI
from prometheus_client import make_asgi_app
from strawberry.fastapi import GraphQLRouter

from shared.logging import configure_logging
from shared.middleware import EdgeMiddleware, RequestIdMiddleware
from shared.schemas import HealthResponse

from gateway.api.dependencies import get_context
from gateway.api.graphql import schema
from gateway.config import GatewaySettings, get_settings

def create_app(settings: GatewaySettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs)
    app = FastAPI(title="LLM GraphQL Gateway", version="0.1.0")
    app.state.settings = settings
    # Last added runs first: request ids wrap the CORS/error edge.
    app.add_middleware(EdgeMiddleware)
    app.add_middleware(RequestIdMiddleware)

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
    )
    app.include_router(graphql_app, prefix="/graphql")

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    mode = "mock" if settings.mock else "openai"

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="gateway", mode=mode)

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        if not settings.mock and not settings.openai_api_key:
            return HealthResponse(status="degraded", service="gateway", mode=mode)
        return HealthResponse(status="ok", service="gateway", mode=mode)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
